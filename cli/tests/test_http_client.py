from __future__ import annotations

import pytest
import typer

from afinimaki_cli import config
from afinimaki_cli.http import client_from_settings, make_client
from afinimaki_client import InvalidEndpoint


def _cfg(**overrides) -> config.AppConfig:
    cfg = config.AppConfig(api_key="k" * 32, api_secret="s" * 32)
    for key, value in overrides.items():
        setattr(cfg, key, value)
    return cfg


def test_make_client_uses_config() -> None:
    client = make_client(_cfg(timeout_s=2.0, debug=True))
    try:
        assert client.config.endpoint_url == "http://api.afinimaki.com/RPC2"
        assert client.config.timeout_s == 2.0
        assert client.config.debug is True
    finally:
        client.close()


def test_make_client_endpoint_override() -> None:
    client = make_client(_cfg(), endpoint_override="127.0.0.1:9000/RPC2")
    try:
        assert client.config.endpoint_url == "http://127.0.0.1:9000/RPC2"
    finally:
        client.close()


def test_make_client_rejects_https_endpoint() -> None:
    with pytest.raises(InvalidEndpoint):
        make_client(_cfg(), endpoint_override="https://secure.test/RPC2")


def test_client_from_settings_exits_without_keys(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    for name in (config.ENV_API_KEY, config.ENV_API_SECRET, config.ENV_ENDPOINT_URL):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(typer.Exit) as exc:
        client_from_settings()
    assert exc.value.exit_code == 2


def test_make_client_is_strict() -> None:
    client = make_client(_cfg())
    try:
        assert client.config.strict is True
    finally:
        client.close()
