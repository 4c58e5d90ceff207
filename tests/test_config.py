from __future__ import annotations

import pytest

from rawhttp.config import DEFAULT_USER_AGENT, ClientConfig, load_config

ENV_KEYS = (
    "RAWHTTP_CONNECT_TIMEOUT",
    "RAWHTTP_KEEPALIVE_INTERVAL",
    "RAWHTTP_READ_TIMEOUT",
    "RAWHTTP_USER_AGENT",
    "RAWHTTP_VERIFY_TLS",
)


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    cfg = load_config()
    assert cfg == ClientConfig()
    assert cfg.connect_timeout == 30.0
    assert cfg.keepalive_interval == 30.0
    assert cfg.read_timeout is None
    assert cfg.user_agent == DEFAULT_USER_AGENT
    assert cfg.verify_tls is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("RAWHTTP_CONNECT_TIMEOUT", "2.5")
    monkeypatch.setenv("RAWHTTP_KEEPALIVE_INTERVAL", "10")
    monkeypatch.setenv("RAWHTTP_READ_TIMEOUT", "7")
    monkeypatch.setenv("RAWHTTP_USER_AGENT", "probe/3.0")
    monkeypatch.setenv("RAWHTTP_VERIFY_TLS", "off")
    cfg = load_config()
    assert cfg.connect_timeout == 2.5
    assert cfg.keepalive_interval == 10.0
    assert cfg.read_timeout == 7.0
    assert cfg.user_agent == "probe/3.0"
    assert cfg.verify_tls is False


@pytest.mark.parametrize(
    "key,value",
    [
        ("RAWHTTP_CONNECT_TIMEOUT", "0"),
        ("RAWHTTP_CONNECT_TIMEOUT", "soon"),
        ("RAWHTTP_READ_TIMEOUT", "-1"),
        ("RAWHTTP_VERIFY_TLS", "maybe"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError):
        load_config()
