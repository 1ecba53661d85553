from __future__ import annotations

import typer

from .commands import call_cmd, discover_cmd, register_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="superapp",
        help="Super App mini-app SDK CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("discover")(discover_cmd.discover)
    app.command("register")(register_cmd.register)
    app.command("call")(call_cmd.call)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            quiet: bool = typer.Option(False, "-q", "--quiet", help="Hide SDK status lines; errors only."),
    ):
        setup_logging(verbose, quiet)

    return app


app = _build_app()
