from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from afinimaki_client.config_types import DEFAULT_ENDPOINT
from platformdirs import user_config_dir

APP_NAME = "afinimaki"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "AFINIMAKI_API_KEY"
ENV_API_SECRET = "AFINIMAKI_API_SECRET"
ENV_ENDPOINT_URL = "AFINIMAKI_ENDPOINT_URL"

SETTING_KEYS = ("endpoint_url", "api_key", "api_secret", "timeout_s", "debug")


@dataclass
class AppConfig:
    endpoint_url: str = DEFAULT_ENDPOINT
    api_key: str = ""
    api_secret: str = ""
    timeout_s: float = 15.0
    debug: bool = False


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_endpoint_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    if "://" not in value:
        value = f"http://{value}"
    return value


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "endpoint_url": cfg.endpoint_url,
        "api_key": cfg.api_key,
        "api_secret": cfg.api_secret,
        "timeout_s": float(cfg.timeout_s),
        "debug": bool(cfg.debug),
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    endpoint_url = normalize_endpoint_url(str(data.get("endpoint_url") or ""))
    if endpoint_url:
        cfg.endpoint_url = endpoint_url
    cfg.api_key = str(data.get("api_key") or "").strip()
    cfg.api_secret = str(data.get("api_secret") or "").strip()
    timeout_raw = data.get("timeout_s")
    if timeout_raw is not None:
        try:
            cfg.timeout_s = float(timeout_raw)
        except (TypeError, ValueError):
            pass
    debug_raw = data.get("debug")
    if isinstance(debug_raw, bool):
        cfg.debug = debug_raw
    return cfg


def apply_env(cfg: AppConfig) -> AppConfig:
    api_key = os.getenv(ENV_API_KEY, "").strip()
    api_secret = os.getenv(ENV_API_SECRET, "").strip()
    endpoint_url = normalize_endpoint_url(os.getenv(ENV_ENDPOINT_URL, ""))
    return AppConfig(
        endpoint_url=endpoint_url or cfg.endpoint_url,
        api_key=api_key or cfg.api_key,
        api_secret=api_secret or cfg.api_secret,
        timeout_s=cfg.timeout_s,
        debug=cfg.debug,
    )


def load_config(*, env: bool = True) -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg) if env else cfg


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def mask_secret(value: str) -> str:
    if not value:
        return "(empty)"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}{'*' * (len(value) - 8)}{value[-4:]}"
