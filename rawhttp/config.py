from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_USER_AGENT = "CustomHttpClient/1.0"


@dataclass(frozen=True)
class ClientConfig:
    connect_timeout: float = 30.0
    keepalive_interval: float = 30.0
    read_timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT
    verify_tls: bool = True

    def __post_init__(self) -> None:
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if self.keepalive_interval <= 0:
            raise ValueError("keepalive_interval must be positive")
        if self.read_timeout is not None and self.read_timeout <= 0:
            raise ValueError("read_timeout must be positive")


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"invalid boolean value: {raw!r}")


def load_config() -> ClientConfig:
    connect_timeout = float(os.environ.get("RAWHTTP_CONNECT_TIMEOUT", "30"))
    keepalive_interval = float(os.environ.get("RAWHTTP_KEEPALIVE_INTERVAL", "30"))
    raw_read_timeout = os.environ.get("RAWHTTP_READ_TIMEOUT", "").strip()
    read_timeout = float(raw_read_timeout) if raw_read_timeout else None
    user_agent = os.environ.get("RAWHTTP_USER_AGENT", DEFAULT_USER_AGENT)
    verify_tls = _parse_bool(os.environ.get("RAWHTTP_VERIFY_TLS", "true"))
    return ClientConfig(
        connect_timeout=connect_timeout,
        keepalive_interval=keepalive_interval,
        read_timeout=read_timeout,
        user_agent=user_agent,
        verify_tls=verify_tls,
    )


__all__ = ["ClientConfig", "DEFAULT_USER_AGENT", "load_config"]
