"""Response body framing: chunked, fixed length, or read until close."""

from __future__ import annotations

import logging
import re
from typing import BinaryIO

from .errors import InvalidChunkSize, InvalidContentLength, ReceiveError, TruncatedBody
from .http import HeaderSet

CRLF = b"\r\n"
MAX_LINE_BYTES = 64 * 1024
READ_BUFFER_SIZE = 64 * 1024

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")

logger = logging.getLogger("rawhttp.body")


def read_line(reader: BinaryIO) -> bytes:
    """Read one line including its terminator; ``b""`` means end of stream."""

    try:
        return reader.readline(MAX_LINE_BYTES)
    except OSError as exc:
        raise ReceiveError("failed to read from transport") from exc


def read_exact(reader: BinaryIO, size: int) -> bytes:
    parts = []
    remaining = size
    while remaining > 0:
        try:
            chunk = reader.read(min(remaining, READ_BUFFER_SIZE))
        except OSError as exc:
            raise ReceiveError("failed to read from transport") from exc
        if not chunk:
            raise TruncatedBody(f"expected {size} bytes, stream closed after {size - remaining}")
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def read_until_close(reader: BinaryIO) -> bytes:
    parts = []
    while True:
        try:
            chunk = reader.read(READ_BUFFER_SIZE)
        except OSError as exc:
            raise ReceiveError("failed to read from transport") from exc
        if not chunk:
            return b"".join(parts)
        parts.append(chunk)


def parse_chunk_size(line: bytes) -> int:
    # chunk extensions (";name=value") carry nothing we use
    token = line.split(b";", 1)[0].strip().decode("ascii", "replace")
    if not _HEX_PATTERN.fullmatch(token):
        raise InvalidChunkSize("invalid chunk size", line)
    return int(token, 16)


def read_chunked(reader: BinaryIO) -> bytes:
    body = bytearray()
    while True:
        line = read_line(reader)
        if not line:
            raise TruncatedBody("stream closed while reading chunk size")
        if not line.endswith(CRLF):
            raise InvalidChunkSize("chunk size line is not terminated by CRLF", line)
        size = parse_chunk_size(line)
        if size == 0:
            break
        body += read_exact(reader, size)
        read_line(reader)

    # trailer section is consumed and dropped
    while True:
        line = read_line(reader)
        if line in (CRLF, b""):
            break
    return bytes(body)


def parse_content_length(raw: str) -> int:
    value = raw.strip()
    if not value.isascii() or not value.isdigit():
        raise InvalidContentLength("invalid Content-Length header", raw)
    return int(value)


def is_chunked(headers: HeaderSet) -> bool:
    return headers.get("Transfer-Encoding", "").strip().lower() == "chunked"


def read_body(reader: BinaryIO, headers: HeaderSet) -> bytes:
    if is_chunked(headers):
        logger.debug("reading chunked body")
        return read_chunked(reader)

    raw_length = headers.get("Content-Length")
    if raw_length is not None:
        length = parse_content_length(raw_length)
        logger.debug("reading fixed-length body of %d bytes", length)
        return read_exact(reader, length)

    logger.debug("no framing headers, reading body until the connection closes")
    return read_until_close(reader)


__all__ = [
    "CRLF",
    "MAX_LINE_BYTES",
    "is_chunked",
    "parse_chunk_size",
    "parse_content_length",
    "read_body",
    "read_chunked",
    "read_exact",
    "read_line",
    "read_until_close",
]
