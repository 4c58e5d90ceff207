from __future__ import annotations

from typing import Any, Optional


class HttpClientError(RuntimeError):
    """Base class for every failure raised by the client."""

    def __init__(self, message: str, context: Optional[Any] = None) -> None:
        if context is not None:
            message = f"{message}: {context!r}"
        super().__init__(message)
        self.context = context


class InvalidRequest(HttpClientError):
    """Raised when the method or URL is missing or cannot be encoded."""


class UrlParseError(HttpClientError):
    """Raised when a URL cannot be decomposed into host and path."""


class DialError(HttpClientError):
    """Raised when the TCP or TLS connection cannot be established."""


class SendError(HttpClientError):
    """Raised when writing the request to the transport fails."""


class ReceiveError(HttpClientError):
    """Raised when reading the response from the transport fails."""


class ResponseParseError(HttpClientError):
    """Raised when the response does not follow the HTTP/1.1 grammar."""


class MalformedStatusLine(ResponseParseError):
    pass


class InvalidStatusCode(ResponseParseError):
    pass


class MalformedHeaderLine(ResponseParseError):
    pass


class BodyFramingError(ResponseParseError):
    """Raised when the response body violates its declared framing."""


class InvalidChunkSize(BodyFramingError):
    pass


class InvalidContentLength(BodyFramingError):
    pass


class TruncatedBody(BodyFramingError):
    pass


__all__ = [
    "BodyFramingError",
    "DialError",
    "HttpClientError",
    "InvalidChunkSize",
    "InvalidContentLength",
    "InvalidRequest",
    "InvalidStatusCode",
    "MalformedHeaderLine",
    "MalformedStatusLine",
    "ReceiveError",
    "ResponseParseError",
    "SendError",
    "TruncatedBody",
    "UrlParseError",
]
