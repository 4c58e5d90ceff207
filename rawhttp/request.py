"""Serialization of outgoing requests.

Headers come from three tiers merged in order, later tiers winning on a
name collision: computed defaults, the client's default headers, then the
headers given for a single call. ``Content-Length`` is always recomputed
from the body and written last.
"""

from __future__ import annotations

from typing import Tuple, Union
from urllib.parse import urlsplit

from .config import DEFAULT_USER_AGENT
from .errors import InvalidRequest, UrlParseError
from .http import HEAD_ENCODING, HeaderSet, HeaderSource, HttpRequest

Body = Union[bytes, bytearray, memoryview, str, None]


def split_url(url: str) -> Tuple[str, str, str]:
    """Return ``(scheme, host, target)`` for ``url``.

    ``host`` is the authority as written (port included), ``target`` is the
    path, ``/`` when empty, followed by the query string if there is one.
    """

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise UrlParseError("unable to parse url", url) from exc
    if not parts.netloc:
        raise UrlParseError("url has no host", url)
    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"
    return parts.scheme.lower(), parts.netloc, target


def default_headers(host: str, user_agent: str = DEFAULT_USER_AGENT) -> HeaderSet:
    return HeaderSet(
        [
            ("Host", host),
            ("User-Agent", user_agent),
            ("Accept", "*/*"),
            ("Accept-Language", "en-US,en;q=0.8"),
            ("Accept-Encoding", "gzip, deflate, br"),
            ("Connection", "keep-alive"),
        ]
    )


def merge_headers(computed: HeaderSource, client: HeaderSource, call: HeaderSource) -> HeaderSet:
    merged = HeaderSet(computed)
    merged.update(client)
    merged.update(call)
    return merged


def _has_line_break(text: str) -> bool:
    return "\r" in text or "\n" in text


def _coerce_body(body: Body) -> bytes:
    if body is None:
        return b""
    if isinstance(body, str):
        return body.encode("utf-8")
    return bytes(body)


def build_request(
    method: str,
    url: str,
    body: Body = b"",
    headers: HeaderSource = None,
    *,
    client_headers: HeaderSource = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> HttpRequest:
    if not method or not url:
        raise InvalidRequest("method and url cannot be empty")
    if any(ch.isspace() for ch in method):
        raise InvalidRequest("method must be a single token", method)

    scheme, host, target = split_url(url)
    payload = _coerce_body(body)

    merged = merge_headers(default_headers(host, user_agent), client_headers, headers)
    for name, value in merged.items():
        if not name or ":" in name or _has_line_break(name) or _has_line_break(value):
            raise InvalidRequest("header would break the request framing", (name, value))
    merged.pop("Content-Length")
    merged.set("Content-Length", len(payload))

    return HttpRequest(
        method=method,
        target=target,
        host=host,
        headers=merged,
        body=payload,
        scheme=scheme,
    )


def serialize_request(request: HttpRequest) -> bytes:
    try:
        return request.serialize()
    except UnicodeEncodeError as exc:
        raise InvalidRequest(f"request head is not {HEAD_ENCODING} encodable") from exc


def encode_request(
    method: str,
    url: str,
    body: Body = b"",
    headers: HeaderSource = None,
    **options,
) -> bytes:
    """Build and serialize a request in one step."""

    return serialize_request(build_request(method, url, body, headers, **options))


__all__ = [
    "build_request",
    "default_headers",
    "encode_request",
    "merge_headers",
    "serialize_request",
    "split_url",
]
