"""HTTP/1.1 client implemented directly over sockets."""

from .client import HttpClient
from .config import ClientConfig, load_config
from .errors import (
    BodyFramingError,
    DialError,
    HttpClientError,
    InvalidChunkSize,
    InvalidContentLength,
    InvalidRequest,
    InvalidStatusCode,
    MalformedHeaderLine,
    MalformedStatusLine,
    ReceiveError,
    ResponseParseError,
    SendError,
    TruncatedBody,
    UrlParseError,
)
from .http import HeaderSet, HttpRequest, HttpResponse
from .parser import parse_response
from .request import build_request, encode_request
from .transport import dial

__all__ = [
    "BodyFramingError",
    "ClientConfig",
    "DialError",
    "HeaderSet",
    "HttpClient",
    "HttpClientError",
    "HttpRequest",
    "HttpResponse",
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
    "build_request",
    "dial",
    "encode_request",
    "load_config",
    "parse_response",
]
