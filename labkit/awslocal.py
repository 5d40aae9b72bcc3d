"""Switch AWS clients to a local mock endpoint for the current context."""

from __future__ import annotations

import contextlib
import contextvars
from dataclasses import dataclass, replace
from typing import Callable, Iterator, Optional

LOCAL_ENDPOINT = "http://127.0.0.1:4566"


@dataclass(frozen=True)
class ConfMock:
    """Credentials and endpoints used when talking to local mocks."""

    access_key: str = "placeholder"
    secret_access_key: str = "secret"
    session_token: str = ""
    s3_endpoint: str = LOCAL_ENDPOINT
    sqs_endpoint: str = LOCAL_ENDPOINT
    cognito_endpoint: str = ""
    dynamo_endpoint: str = LOCAL_ENDPOINT


OptionMock = Callable[[ConfMock], ConfMock]

_current: contextvars.ContextVar[Optional[ConfMock]] = contextvars.ContextVar(
    "labkit_awslocal", default=None
)


def _setter(field: str, value: str) -> OptionMock:
    def apply(conf: ConfMock) -> ConfMock:
        return replace(conf, **{field: value})

    return apply


def with_access_key(access_key: str) -> OptionMock:
    """Option that sets the access key."""
    return _setter("access_key", access_key)


def with_secret_access_key(secret_access_key: str) -> OptionMock:
    """Option that sets the secret access key."""
    return _setter("secret_access_key", secret_access_key)


def with_session_token(session_token: str) -> OptionMock:
    """Option that sets the session token."""
    return _setter("session_token", session_token)


def with_s3_endpoint(endpoint: str) -> OptionMock:
    """Option that sets the S3 endpoint."""
    return _setter("s3_endpoint", endpoint)


def with_sqs_endpoint(endpoint: str) -> OptionMock:
    """Option that sets the SQS endpoint."""
    return _setter("sqs_endpoint", endpoint)


def with_cognito_endpoint(endpoint: str) -> OptionMock:
    """Option that sets the Cognito endpoint."""
    return _setter("cognito_endpoint", endpoint)


def with_dynamo_endpoint(endpoint: str) -> OptionMock:
    """Option that sets the DynamoDB endpoint."""
    return _setter("dynamo_endpoint", endpoint)


@contextlib.contextmanager
def with_context(*args: OptionMock) -> Iterator[ConfMock]:
    """Mark the enclosed block as using local mocks, configured by the options."""
    conf = ConfMock()
    for option in args:
        conf = option(conf)
    token = _current.set(conf)
    try:
        yield conf
    finally:
        _current.reset(token)


def is_local() -> bool:
    """Return True inside a with_context block."""
    return _current.get() is not None


def get_conf() -> Optional[ConfMock]:
    """Return the active mock configuration, or None outside with_context."""
    return _current.get()