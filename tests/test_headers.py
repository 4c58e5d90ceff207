from __future__ import annotations

import pytest

from rawhttp.http import HeaderSet


def test_header_set_preserves_insertion_order() -> None:
    headers = HeaderSet([("B", "2"), ("A", "1"), ("C", "3")])
    assert headers.names() == ["B", "A", "C"]


def test_header_lookup_is_case_insensitive() -> None:
    headers = HeaderSet({"Content-Type": "text/plain"})
    assert headers["content-type"] == "text/plain"
    assert headers.get("CONTENT-TYPE") == "text/plain"
    assert "content-TYPE" in headers
    assert headers.get("missing") is None
    with pytest.raises(KeyError):
        headers["missing"]


def test_overwrite_keeps_position_and_takes_last_spelling() -> None:
    headers = HeaderSet([("Host", "a"), ("Accept", "*/*")])
    headers.set("host", "b")
    assert headers.items() == [("host", "b"), ("Accept", "*/*")]
    assert len(headers) == 2


def test_pop_and_copy_are_independent() -> None:
    headers = HeaderSet({"X-One": "1", "X-Two": "2"})
    clone = headers.copy()
    assert headers.pop("x-one") == "1"
    assert headers.pop("x-one") is None
    assert "X-One" in clone
    assert clone != headers


def test_values_are_stored_as_strings() -> None:
    headers = HeaderSet()
    headers["Content-Length"] = 12
    assert headers["Content-Length"] == "12"
    assert headers == {"Content-Length": "12"}
