"""Connection establishment for plain and TLS transports."""

from __future__ import annotations

import logging
import socket
import ssl
from typing import Callable, Optional, Tuple

from .config import ClientConfig
from .errors import DialError

DEFAULT_PORTS = {"http": 80, "https": 443}

Dialer = Callable[[str, str, ClientConfig], socket.socket]

logger = logging.getLogger("rawhttp.transport")


def split_host_port(host: str, scheme: str) -> Tuple[str, int]:
    default_port = DEFAULT_PORTS.get(scheme, DEFAULT_PORTS["http"])
    if host.startswith("["):
        address, _, rest = host[1:].partition("]")
        if rest and not rest.startswith(":"):
            raise DialError("unexpected text after IPv6 address", host)
        port_text = rest[1:]
    elif host.count(":") == 1:
        address, _, port_text = host.partition(":")
    else:
        address, port_text = host, ""
    if not address:
        raise DialError("missing host name", host)
    if not port_text:
        return address, default_port
    try:
        port = int(port_text)
    except ValueError as exc:
        raise DialError("invalid port", host) from exc
    if port <= 0 or port > 65535:
        raise DialError("invalid port", host)
    return address, port


def _enable_keepalive(sock: socket.socket, interval: float) -> None:
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
    seconds = max(1, int(interval))
    # not every platform exposes the per-socket probe timers
    if hasattr(socket, "TCP_KEEPIDLE"):
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, seconds)
    if hasattr(socket, "TCP_KEEPINTVL"):
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, seconds)


def _tls_context(config: ClientConfig) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if not config.verify_tls:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def dial(scheme: str, host: str, config: Optional[ClientConfig] = None) -> socket.socket:
    """Open a connected socket to ``host``, wrapped in TLS for ``https``."""

    config = config or ClientConfig()
    if scheme not in DEFAULT_PORTS:
        raise DialError("unsupported scheme", scheme)
    address, port = split_host_port(host, scheme)
    logger.debug("dialing %s://%s:%d", scheme, address, port)

    try:
        sock = socket.create_connection((address, port), timeout=config.connect_timeout)
    except OSError as exc:
        raise DialError(f"failed to establish connection: {exc}", host) from exc

    try:
        _enable_keepalive(sock, config.keepalive_interval)
        if scheme == "https":
            sock = _tls_context(config).wrap_socket(sock, server_hostname=address)
        sock.settimeout(config.read_timeout)
    except OSError as exc:
        sock.close()
        raise DialError(f"failed to establish connection: {exc}", host) from exc

    return sock


__all__ = ["DEFAULT_PORTS", "Dialer", "dial", "split_host_port"]
