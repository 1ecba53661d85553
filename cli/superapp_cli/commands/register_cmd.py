from __future__ import annotations

import typer

from superapp_client import SuperAppError

from .. import console
from ..config import load_config
from ..http import make_client


def register(
        app_name: str | None = typer.Argument(None, help="Mini-app name (defaults to settings app_name)."),
        functions: list[str] | None = typer.Option(None, "--function", "-f", help="Exposed function name. Repeatable."),
        url: str | None = typer.Option(None, "--url", help="Mini-app callback URL (defaults to settings app_url)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Probe this Super App URL first."),
) -> None:
    """Register this mini-app and its functions with the Super App."""
    cfg = load_config()
    name = (app_name or cfg.app_name).strip()
    app_url = (url or cfg.app_url).strip()
    functions = functions or []
    if not name:
        console.err("Mini-app name is required. Pass it or run `superapp settings set --app-name ...`.")
        raise typer.Exit(code=2)
    if not app_url:
        console.err("Mini-app URL is required. Pass --url or run `superapp settings set --app-url ...`.")
        raise typer.Exit(code=2)

    client = make_client(cfg, base_url_override=base_url)
    try:
        client.register(name, functions, app_url)
    except SuperAppError as e:
        console.err(f"Registration failed: {e}")
        raise typer.Exit(code=1)
    finally:
        client.close()
    console.ok(f"Registered {name} ({len(functions)} function(s)) at {client.base_url}")
