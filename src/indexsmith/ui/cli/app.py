"""Typer application wiring for the indexsmith CLI."""

from __future__ import annotations

from typing import Annotated

import typer

from indexsmith.ui.cli.commands.render import render
from indexsmith.version import get_version

from .state import debug_enabled, emit_error, get_cli_state


app = typer.Typer(
    help="Compose the index.html document shell of a presentation deck.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the indexsmith version and exit.",
        ),
    ] = False,
) -> None:
    """Compose the index.html document shell of a presentation deck."""


app.command()(render)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
