"""Fetch a URL with the socket client and print the response."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .client import HttpClient
from .config import load_config
from .errors import HttpClientError


def _parse_header(raw: str) -> Tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected 'Name: value', got {raw!r}")
    return name.strip(), value.strip()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rawhttp",
        description="Send a single HTTP/1.1 request over a raw socket and print the response.",
    )
    parser.add_argument("url", help="Absolute http:// or https:// URL.")
    parser.add_argument(
        "-X",
        "--method",
        default=None,
        help="Request method (defaults to GET, or POST when --data is given).",
    )
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        type=_parse_header,
        default=[],
        help="Extra request header, may be repeated.",
    )
    parser.add_argument("-d", "--data", default=None, help="Request body.")
    parser.add_argument(
        "-i",
        "--include",
        action="store_true",
        help="Print the status line and response headers before the body.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config()
    except ValueError as exc:
        print(f"[rawhttp] invalid configuration: {exc}", file=sys.stderr)
        return 2

    method = (args.method or ("POST" if args.data is not None else "GET")).upper()
    headers: List[Tuple[str, str]] = args.headers
    client = HttpClient(config=config)

    try:
        response = client.request(method, args.url, args.data or b"", headers)
    except HttpClientError as exc:
        print(f"[rawhttp] {exc}", file=sys.stderr)
        return 1

    out = sys.stdout.buffer
    if args.include:
        head = f"{response.protocol} {response.status_code} {response.reason}\r\n"
        head += "".join(f"{name}: {value}\r\n" for name, value in response.headers.items())
        out.write(head.encode("iso-8859-1") + b"\r\n")
    out.write(response.body)
    out.flush()
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
