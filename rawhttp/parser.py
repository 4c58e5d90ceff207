"""Response parsing state machine.

The parser moves ``STATUS_LINE -> HEADERS -> BODY -> DONE``; any failure
moves it to ``ERRORED`` and the partially built response is discarded.
"""

from __future__ import annotations

import enum
import logging
from typing import BinaryIO, Optional, Tuple

from .body import CRLF, read_body, read_line
from .errors import (
    HttpClientError,
    InvalidStatusCode,
    MalformedHeaderLine,
    MalformedStatusLine,
)
from .http import HEAD_ENCODING, HeaderSet, HttpResponse

logger = logging.getLogger("rawhttp.parser")


class ParserState(enum.Enum):
    STATUS_LINE = "status_line"
    HEADERS = "headers"
    BODY = "body"
    DONE = "done"
    ERRORED = "errored"


def parse_status_line(line: bytes) -> Tuple[str, int, str]:
    if not line.endswith(CRLF):
        raise MalformedStatusLine("status line is not terminated by CRLF", line)
    parts = line[:-2].decode(HEAD_ENCODING).split(None, 2)
    if len(parts) != 3:
        raise MalformedStatusLine("malformed status line", line)
    protocol, raw_code, reason = parts
    if not raw_code.isascii() or not raw_code.isdigit():
        raise InvalidStatusCode("invalid status code", raw_code)
    return protocol, int(raw_code), reason.strip()


def parse_header_line(line: bytes) -> Tuple[str, str]:
    if not line.endswith(CRLF):
        raise MalformedHeaderLine("header line is not terminated by CRLF", line)
    text = line[:-2].decode(HEAD_ENCODING)
    name, sep, value = text.partition(":")
    if not sep:
        raise MalformedHeaderLine("malformed header line", text)
    return name.strip(), value.strip()


class ResponseParser:
    """Reads one response from a binary stream.

    ``reader`` needs ``readline(limit)`` and ``read(n)``, so both
    ``socket.makefile("rb")`` and :class:`io.BytesIO` work.
    """

    def __init__(self, reader: BinaryIO) -> None:
        self._reader = reader
        self.state = ParserState.STATUS_LINE
        self._status: Optional[Tuple[str, int, str]] = None
        self._headers = HeaderSet()
        self._response: Optional[HttpResponse] = None

    def parse(self) -> HttpResponse:
        try:
            while self.state is not ParserState.DONE:
                self._step()
        except HttpClientError:
            self.state = ParserState.ERRORED
            self._status = None
            self._headers = HeaderSet()
            raise
        if self._response is None:
            raise RuntimeError("parser finished without a response")
        return self._response

    def _step(self) -> None:
        if self.state is ParserState.STATUS_LINE:
            self._status = parse_status_line(read_line(self._reader))
            self.state = ParserState.HEADERS
        elif self.state is ParserState.HEADERS:
            line = read_line(self._reader)
            if line in (CRLF, b""):
                self.state = ParserState.BODY
                return
            name, value = parse_header_line(line)
            self._headers.set(name, value)
        elif self.state is ParserState.BODY:
            if self._status is None:
                raise RuntimeError("parser reached the body without a status line")
            protocol, status_code, reason = self._status
            body = read_body(self._reader, self._headers)
            self._response = HttpResponse(protocol, status_code, reason, self._headers, body)
            self.state = ParserState.DONE
        else:
            raise RuntimeError(f"parser cannot advance from {self.state.value}")


def parse_response(reader: BinaryIO) -> HttpResponse:
    parser = ResponseParser(reader)
    try:
        return parser.parse()
    except HttpClientError as exc:
        logger.warning("failed to parse response: %s", exc)
        raise


__all__ = [
    "ParserState",
    "ResponseParser",
    "parse_header_line",
    "parse_response",
    "parse_status_line",
]
