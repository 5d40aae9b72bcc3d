"""Options for sending and receiving SQS messages."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional


@dataclass(frozen=True)
class ReceiveMessageConf:
    """Settings for receiving messages."""

    max_number_of_messages: int = 1
    wait_time_seconds: int = 20
    visibility_timeout: int = 30


@dataclass(frozen=True)
class SendMessageConf:
    """Settings for sending a message."""

    delay_seconds: int = 0
    message_attributes: Optional[Mapping[str, Any]] = None


ReceiveMessageOption = Callable[[ReceiveMessageConf], ReceiveMessageConf]
SendMessageOption = Callable[[SendMessageConf], SendMessageConf]


def with_max_number_of_messages(max_number_of_messages: int) -> ReceiveMessageOption:
    """Option that sets how many messages to receive at most (1 to 10)."""
    return lambda conf: replace(conf, max_number_of_messages=max_number_of_messages)


def with_wait_time_seconds(wait_time_seconds: int) -> ReceiveMessageOption:
    """Option that sets the long-polling wait time."""
    return lambda conf: replace(conf, wait_time_seconds=wait_time_seconds)


def with_visibility_timeout(visibility_timeout: int) -> ReceiveMessageOption:
    """Option that sets how long received messages stay hidden."""
    return lambda conf: replace(conf, visibility_timeout=visibility_timeout)


def receive_conf(*args: ReceiveMessageOption) -> ReceiveMessageConf:
    """Return the receive settings: defaults with the options applied in order."""
    conf = ReceiveMessageConf()
    for option in args:
        conf = option(conf)
    return conf


def with_delay_seconds(delay_seconds: int) -> SendMessageOption:
    """Option that sets the delivery delay."""
    return lambda conf: replace(conf, delay_seconds=delay_seconds)


def with_message_attributes(attributes: Mapping[str, Any]) -> SendMessageOption:
    """Option that sets the message attributes."""
    return lambda conf: replace(conf, message_attributes=attributes)


def send_conf(*args: SendMessageOption) -> SendMessageConf:
    """Return the send settings: defaults with the options applied in order."""
    conf = SendMessageConf()
    for option in args:
        conf = option(conf)
    return conf