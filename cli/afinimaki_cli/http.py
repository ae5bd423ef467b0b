from __future__ import annotations

import typer
from afinimaki_client import AfinimakiClient
from afinimaki_client.config_types import ClientConfig
from afinimaki_client.errors import AfinimakiClientError, AuthError, ConstructionError, FaultError, MissingArgumentError

from . import console
from .config import AppConfig, load_config, normalize_endpoint_url


def make_client(cfg: AppConfig, *, endpoint_override: str | None = None) -> AfinimakiClient:
    endpoint_url = normalize_endpoint_url(endpoint_override) or cfg.endpoint_url
    return AfinimakiClient(
        ClientConfig(
            api_key=cfg.api_key,
            api_secret=cfg.api_secret,
            endpoint_url=endpoint_url,
            debug=cfg.debug,
            timeout_s=cfg.timeout_s,
            strict=True,
        )
    )


def client_from_settings(endpoint_override: str | None = None) -> AfinimakiClient:
    """Client for a command; exits with code 2 when the settings cannot build one."""
    cfg = load_config()
    try:
        return make_client(cfg, endpoint_override=endpoint_override)
    except ConstructionError as e:
        console.err(str(e))
        console.info("Run 'afinimaki settings init' or set AFINIMAKI_API_KEY / AFINIMAKI_API_SECRET.")
        raise typer.Exit(code=2)


def fail(action: str, e: AfinimakiClientError):
    if isinstance(e, MissingArgumentError):
        console.err(f"Nothing sent: {e}")
    elif isinstance(e, AuthError):
        console.err("Unauthorized. Check api_key/api_secret and the local clock.")
    elif isinstance(e, FaultError):
        console.err(f"Failed to {action}: server fault {e.status_code}: {e}")
    else:
        console.err(f"Failed to {action}: {e}")
    raise typer.Exit(code=2)
