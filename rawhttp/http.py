"""Minimal HTTP message primitives used by the socket client.

The goal is to avoid the helpers from :mod:`http.client` and provide the
value objects the request builder and response parser work with.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

HTTP_VERSION = "HTTP/1.1"
HEAD_ENCODING = "iso-8859-1"

_CHARSET_PATTERN = re.compile(r"charset=\"?([\w.:-]+)\"?", re.IGNORECASE)

HeaderSource = Union["HeaderSet", Mapping[str, str], Iterable[Tuple[str, str]], None]


class HeaderSet:
    """Insertion-ordered header table with case-insensitive lookup.

    Overwriting a header keeps its original position but takes the name
    spelling and value of the last writer, so serialization is reproducible.
    """

    __slots__ = ("_entries",)

    def __init__(self, source: HeaderSource = None) -> None:
        self._entries: Dict[str, Tuple[str, str]] = {}
        if source is not None:
            self.update(source)

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def set(self, name: str, value: object) -> None:
        self._entries[self._key(name)] = (name, str(value))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._entries.get(self._key(name))
        return entry[1] if entry is not None else default

    def pop(self, name: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._entries.pop(self._key(name), None)
        return entry[1] if entry is not None else default

    def update(self, source: HeaderSource) -> None:
        if source is None:
            return
        if isinstance(source, HeaderSet):
            pairs: Iterable[Tuple[str, str]] = source.items()
        elif isinstance(source, Mapping):
            pairs = source.items()
        else:
            pairs = source
        for name, value in pairs:
            self.set(name, value)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._entries.values())

    def names(self) -> List[str]:
        return [name for name, _ in self._entries.values()]

    def copy(self) -> "HeaderSet":
        clone = HeaderSet()
        clone._entries = dict(self._entries)
        return clone

    def __getitem__(self, name: str) -> str:
        entry = self._entries.get(self._key(name))
        if entry is None:
            raise KeyError(name)
        return entry[1]

    def __setitem__(self, name: str, value: object) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderSet):
            return self.items() == other.items()
        if isinstance(other, Mapping):
            return self.items() == list(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"HeaderSet({self.items()!r})"


@dataclass(slots=True)
class HttpRequest:
    """Represents an outgoing HTTP/1.1 request."""

    method: str
    target: str
    host: str
    headers: HeaderSet = field(default_factory=HeaderSet)
    body: bytes = b""
    scheme: str = "http"

    def serialize(self) -> bytes:
        """Render the request line, header block and body as wire bytes."""

        head = f"{self.method} {self.target} {HTTP_VERSION}\r\n"
        head += "".join(f"{name}: {value}\r\n" for name, value in self.headers.items())
        head += "\r\n"
        return head.encode(HEAD_ENCODING) + self.body


@dataclass(slots=True)
class HttpResponse:
    """Represents an HTTP/1.1 response read back from the server."""

    protocol: str
    status_code: int
    reason: str
    headers: HeaderSet = field(default_factory=HeaderSet)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def text(self, encoding: Optional[str] = None) -> str:
        """Decode the body using ``encoding``, the declared charset, or UTF-8."""

        if encoding is None:
            match = _CHARSET_PATTERN.search(self.headers.get("Content-Type", ""))
            encoding = match.group(1) if match else "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError:
            encoding = "utf-8"
        return self.body.decode(encoding, errors="replace")


__all__ = [
    "HEAD_ENCODING",
    "HTTP_VERSION",
    "HeaderSet",
    "HttpRequest",
    "HttpResponse",
]
