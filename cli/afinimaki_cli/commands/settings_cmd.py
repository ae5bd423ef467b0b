from __future__ import annotations

import os

import typer
from afinimaki_client.config_types import KEY_LENGTH

from .. import console
from ..config import (
    SETTING_KEYS,
    config_path,
    default_config,
    load_config,
    mask_secret,
    normalize_endpoint_url,
    save_config,
)

app = typer.Typer(help="Manage local CLI settings (~/.config/afinimaki/config.toml).")


def _check_key(name: str, value: str) -> None:
    if len(value) != KEY_LENGTH:
        console.err(f"{name} must be {KEY_LENGTH} characters long (got {len(value)}).")
        raise typer.Exit(code=2)


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        api_key: str = typer.Option(..., "--api-key", prompt="API key", help="API key from afinimaki.com."),
        api_secret: str = typer.Option(
            ...,
            "--api-secret",
            prompt="API secret",
            hide_input=True,
            help="API secret from afinimaki.com.",
        ),
        endpoint_url: str | None = typer.Option(None, "--endpoint", help="Endpoint URL override."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    api_key = api_key.strip()
    api_secret = api_secret.strip()
    _check_key("api_key", api_key)
    _check_key("api_secret", api_secret)

    cfg = default_config()
    cfg.api_key = api_key
    cfg.api_secret = api_secret
    if endpoint_url:
        cfg.endpoint_url = normalize_endpoint_url(endpoint_url)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"endpoint_url={cfg.endpoint_url} api_key={cfg.api_key or '(empty)'} "
        f"api_secret={mask_secret(cfg.api_secret)} timeout_s={cfg.timeout_s} debug={cfg.debug}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(SETTING_KEYS)})."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    value = getattr(cfg, k)
    if k == "api_secret":
        value = mask_secret(value)
    console.console.print(str(value), markup=False)


@app.command("set")
def set_setting(
        endpoint_url: str | None = typer.Option(None, "--endpoint", help="Set endpoint URL."),
        api_key: str | None = typer.Option(None, "--api-key", help="Set API key."),
        api_secret: str | None = typer.Option(None, "--api-secret", help="Set API secret."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Set request timeout in seconds."),
        debug: bool | None = typer.Option(None, "--debug/--no-debug", help="Print every call to stderr."),
):
    cfg = load_config(env=False)
    if endpoint_url is not None:
        cfg.endpoint_url = normalize_endpoint_url(endpoint_url) or default_config().endpoint_url
        if not cfg.endpoint_url.startswith("http://"):
            console.warn(f"{cfg.endpoint_url} is not an http:// URL; commands will refuse it.")
    if api_key is not None:
        _check_key("api_key", api_key.strip())
        cfg.api_key = api_key.strip()
    if api_secret is not None:
        _check_key("api_secret", api_secret.strip())
        cfg.api_secret = api_secret.strip()
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    if debug is not None:
        cfg.debug = debug
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
