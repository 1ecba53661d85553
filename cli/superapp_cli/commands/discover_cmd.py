from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import discover as run_discovery


def discover(
        base_url: str | None = typer.Option(None, "--base-url", help="Probe this URL before the defaults."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Find a reachable Super App host."""
    cfg = load_config()
    result = run_discovery(cfg, base_url_override=base_url)
    if json_output:
        console.print_json(
            {"base_url": result.base_url, "confirmed": result.confirmed, "probed": result.attempts}
        )
        return
    if result.confirmed:
        console.ok(f"Super App reachable at {result.base_url}")
    console.console.print(result.base_url)
