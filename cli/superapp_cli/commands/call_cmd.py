from __future__ import annotations

import json

import typer

from superapp_client import DecodeError, RequestTimeoutError, SuperAppError

from .. import console
from ..config import load_config
from ..http import make_client


def _parse_payload(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except ValueError as e:
        console.err(f"--payload is not valid JSON: {e}")
        raise typer.Exit(code=2)
    if not isinstance(data, dict):
        console.err("--payload must be a JSON object.")
        raise typer.Exit(code=2)
    return data


def call(
        target_app: str = typer.Argument(..., help="Mini-app that exposes the function."),
        function_name: str = typer.Argument(..., help="Function to invoke."),
        caller: str | None = typer.Option(None, "--caller", help="Calling mini-app name (defaults to settings app_name)."),
        payload: str = typer.Option("{}", "--payload", "-p", help="JSON object passed to the function."),
        base_url: str | None = typer.Option(None, "--base-url", help="Probe this Super App URL first."),
) -> None:
    """Call another mini-app's function through the Super App."""
    cfg = load_config()
    body = _parse_payload(payload)
    caller_name = (caller or cfg.app_name).strip()
    if not caller_name:
        console.err("Caller name is required. Pass --caller or run `superapp settings set --app-name ...`.")
        raise typer.Exit(code=2)

    client = make_client(cfg, base_url_override=base_url)
    try:
        result = client.call_function(caller_name, target_app, function_name, body)
    except RequestTimeoutError as e:
        console.err(f"Call timed out: {e}")
        raise typer.Exit(code=1)
    except DecodeError as e:
        console.err(f"Malformed response: {e}")
        raise typer.Exit(code=1)
    except SuperAppError as e:
        console.err(f"Call failed: {e}")
        raise typer.Exit(code=1)
    finally:
        client.close()
    console.print_json(result)
