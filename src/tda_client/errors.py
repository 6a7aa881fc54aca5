"""
Error taxonomy for the TD Ameritrade client.

Purpose:
- Give callers one base class (TdaClientError) to catch everything.
- Keep the three failure families distinct: bad status, bad body, no network.

Tracing notes:
- UnexpectedStatusError carries the status code and raw body verbatim.
- MalformedResponseError chains the underlying SchemaError/ValueError.
- TransportError chains the requests/aiohttp exception.
- Nothing in this package retries or logs these; they go to the caller.
"""

from __future__ import annotations

from typing import Any


class TdaClientError(Exception):
    """
    Base class for every error raised by tda_client.
    """


class UnexpectedStatusError(TdaClientError):
    """
    The API answered with a status other than 200.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Received a {status_code} HTTP code: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(TdaClientError):
    """
    Status was 200 but the body did not match the expected schema.
    """

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(f"Failed to parse response: {message}")
        self.payload = payload


class TransportError(TdaClientError):
    """
    The request failed before any status code was received.
    """


class MissingAccessTokenError(TdaClientError):
    """
    An authenticated method was called before an access token was installed.
    """

    def __init__(self) -> None:
        super().__init__("Client does not have an access token set.")


class UnsupportedAccountTypeError(TdaClientError):
    """
    The securities account payload did not match any modeled variant.
    """

    def __init__(self, raw: dict[str, Any]) -> None:
        account_type = raw.get("type", "UNKNOWN")
        super().__init__(f"Unsupported securities account type: {account_type}")
        self.raw = raw


class SchemaError(ValueError):
    """
    Raised by response decoders when a payload has the wrong shape.
    """
