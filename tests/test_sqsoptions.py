import pytest

from labkit import sqsoptions


def test_receive_defaults():
    conf = sqsoptions.receive_conf()
    assert conf.max_number_of_messages == 1
    assert conf.wait_time_seconds == 20
    assert conf.visibility_timeout == 30


def test_receive_options():
    conf = sqsoptions.receive_conf(
        sqsoptions.with_max_number_of_messages(10),
        sqsoptions.with_wait_time_seconds(0),
        sqsoptions.with_visibility_timeout(5),
    )
    assert conf == sqsoptions.ReceiveMessageConf(
        max_number_of_messages=10, wait_time_seconds=0, visibility_timeout=5
    )


def test_receive_partial_override_keeps_defaults():
    conf = sqsoptions.receive_conf(sqsoptions.with_wait_time_seconds(0))
    assert conf.wait_time_seconds == 0
    assert conf.max_number_of_messages == 1
    assert conf.visibility_timeout == 30


def test_receive_last_option_wins():
    conf = sqsoptions.receive_conf(
        sqsoptions.with_visibility_timeout(5),
        sqsoptions.with_visibility_timeout(7),
    )
    assert conf.visibility_timeout == 7


def test_send_defaults():
    conf = sqsoptions.send_conf()
    assert conf.delay_seconds == 0
    assert conf.message_attributes is None


def test_send_options():
    attributes = {"kind": {"DataType": "String", "StringValue": "demo"}}
    conf = sqsoptions.send_conf(
        sqsoptions.with_delay_seconds(3),
        sqsoptions.with_message_attributes(attributes),
    )
    assert conf.delay_seconds == 3
    assert conf.message_attributes == attributes


def test_receive_option_rejected_by_send_conf():
    with pytest.raises(TypeError):
        sqsoptions.send_conf(sqsoptions.with_visibility_timeout(5))


def test_conf_is_immutable():
    conf = sqsoptions.receive_conf()
    with pytest.raises(AttributeError):
        conf.wait_time_seconds = 0
    assert conf.wait_time_seconds == 20