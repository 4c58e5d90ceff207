from __future__ import annotations

import logging
import time
from contextlib import closing
from dataclasses import dataclass, field
from typing import Dict, Optional

from .config import ClientConfig
from .errors import SendError
from .http import HeaderSet, HeaderSource, HttpResponse
from .parser import parse_response
from .request import Body, build_request, serialize_request
from .transport import Dialer, dial

logger = logging.getLogger("rawhttp.client")


@dataclass
class HttpClient:
    """One-connection-per-call HTTP/1.1 client.

    ``default_headers`` are copied at construction and never mutated, so a
    client can be shared between threads.
    """

    default_headers: Optional[Dict[str, str]] = None
    config: ClientConfig = field(default_factory=ClientConfig)
    dialer: Dialer = dial

    def __post_init__(self) -> None:
        self._default_headers = HeaderSet(self.default_headers)
        self.default_headers = dict(self._default_headers.items())

    def request(
        self,
        method: str,
        url: str,
        body: Body = b"",
        headers: HeaderSource = None,
    ) -> HttpResponse:
        request = build_request(
            method,
            url,
            body,
            headers,
            client_headers=self._default_headers,
            user_agent=self.config.user_agent,
        )
        payload = serialize_request(request)

        start = time.monotonic()
        with closing(self.dialer(request.scheme, request.host, self.config)) as conn:
            logger.debug("sending %d bytes to %s", len(payload), request.host)
            try:
                conn.sendall(payload)
            except OSError as exc:
                raise SendError(f"failed to send request: {exc}", url) from exc

            with conn.makefile("rb") as reader:
                response = parse_response(reader)

        duration_ms = round((time.monotonic() - start) * 1000, 1)
        logger.info(
            "%s %s -> %d (%d bytes, %sms)",
            method,
            url,
            response.status_code,
            len(response.body),
            duration_ms,
        )
        return response

    def get(self, url: str, headers: HeaderSource = None) -> HttpResponse:
        return self.request("GET", url, b"", headers)

    def post(self, url: str, body: Body = b"", headers: HeaderSource = None) -> HttpResponse:
        return self.request("POST", url, body, headers)

    def options(self, url: str, headers: HeaderSource = None) -> HttpResponse:
        return self.request("OPTIONS", url, b"", headers)


__all__ = ["HttpClient"]
