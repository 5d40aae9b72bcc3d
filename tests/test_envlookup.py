import uuid
from datetime import datetime, timezone

import pytest

from labkit.envlookup import look_up_bool, look_up_int, look_up_string, look_up_time

MISSING = "LABKIT_TEST_NOT_EXIST"


@pytest.fixture
def key(monkeypatch):
    monkeypatch.delenv(MISSING, raising=False)
    return f"LABKIT_{uuid.uuid4().hex}"


@pytest.mark.parametrize("required", [True, False])
def test_string_key_exists(monkeypatch, key, required):
    monkeypatch.setenv(key, "a sentence of words")
    assert look_up_string(key, required) == "a sentence of words"


def test_string_required_missing(key):
    with pytest.raises(LookupError, match=MISSING):
        look_up_string(MISSING, True)


def test_string_not_required_missing(key):
    assert look_up_string(MISSING, False) == ""


@pytest.mark.parametrize("raw,want", [("1", 1), ("0", 0), ("-12", -12)])
def test_int_key_exists(monkeypatch, key, raw, want):
    monkeypatch.setenv(key, raw)
    assert look_up_int(key) == want


@pytest.mark.parametrize("raw", ["hoge", " 1", "1_000", ""])
def test_int_not_int(monkeypatch, key, raw):
    monkeypatch.setenv(key, raw)
    with pytest.raises(ValueError):
        look_up_int(key)


def test_int_missing(key):
    with pytest.raises(LookupError):
        look_up_int(MISSING)


def test_time_key_exists(monkeypatch, key):
    monkeypatch.setenv(key, "2022-01-02T03:04:05Z")
    assert look_up_time(key) == datetime(2022, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_time_with_offset_and_fraction(monkeypatch, key):
    monkeypatch.setenv(key, "2022-01-02T12:04:05.5+09:00")
    assert look_up_time(key) == datetime(2022, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", ["2022-01-02", "hoge"])
def test_time_invalid(monkeypatch, key, raw):
    monkeypatch.setenv(key, raw)
    with pytest.raises(ValueError):
        look_up_time(key)


def test_time_missing(key):
    with pytest.raises(LookupError):
        look_up_time(MISSING)


@pytest.mark.parametrize(
    "raw,required,want",
    [
        ("true", True, True),
        ("false", True, False),
        ("1", True, True),
        ("0", True, False),
        ("true", False, True),
        ("aaa", False, False),
    ],
)
def test_bool_values(monkeypatch, key, raw, required, want):
    monkeypatch.setenv(key, raw)
    assert look_up_bool(key, required) is want


@pytest.mark.parametrize("raw", ["", "aaa"])
def test_bool_required_parse_error(monkeypatch, key, raw):
    monkeypatch.setenv(key, raw)
    with pytest.raises(ValueError, match="environment variable is not set to"):
        look_up_bool(key, True)


def test_bool_required_missing(key):
    with pytest.raises(LookupError):
        look_up_bool(MISSING, True)


def test_bool_not_required_missing(key):
    assert look_up_bool(MISSING, False) is False