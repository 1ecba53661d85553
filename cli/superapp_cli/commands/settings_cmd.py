from __future__ import annotations

import os

import typer

from .. import console
from ..config import SETTING_KEYS, config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local SDK settings (~/.config/superapp/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        app_name: str = typer.Option(..., "--app-name", prompt="Mini-app name", help="Name this mini-app registers as."),
        app_url: str = typer.Option(
            ...,
            "--app-url",
            prompt="Mini-app URL",
            help="URL where the Super App reaches this mini-app, like http://localhost:3000",
        ),
        api_key: str = typer.Option("", "--api-key", help="API key (stored, not sent yet)."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.app_name = app_name.strip()
    cfg.app_url = app_url.strip()
    cfg.api_key = api_key.strip()
    if not cfg.app_name:
        console.err("Mini-app name cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    key_state = "(set)" if cfg.api_key else "(empty)"
    console.console.print(
        f"base_url={cfg.base_url or '(discover)'} app_name={cfg.app_name} app_url={cfg.app_url} api_key={key_state}"
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
    console.console.print(getattr(cfg, k))


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Super App URL to probe before the defaults."),
        app_name: str | None = typer.Option(None, "--app-name", help="Set mini-app name."),
        app_url: str | None = typer.Option(None, "--app-url", help="Set mini-app callback URL."),
        api_key: str | None = typer.Option(None, "--api-key", help="Set API key."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url)
    if app_name is not None:
        cfg.app_name = app_name.strip()
    if app_url is not None:
        cfg.app_url = app_url.strip()
    if api_key is not None:
        cfg.api_key = api_key.strip()
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
