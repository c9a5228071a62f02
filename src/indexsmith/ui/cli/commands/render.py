"""Render command composing the index.html of a deck."""

from __future__ import annotations

import sys

import typer

from indexsmith import builtin_client_root
from indexsmith.core.assembler import setup_index_html
from indexsmith.core.config import IndexHtmlOptions
from indexsmith.core.exceptions import IndexHtmlError
from indexsmith.core.frontmatter import load_deck

from .._options import (
    BaseOption,
    ClientRootOption,
    DebugOption,
    EntryArgument,
    ModeChoice,
    ModeOption,
    OutputOption,
    RootOption,
    UserRootOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, set_cli_state


def render(
    ctx: typer.Context,
    entry: EntryArgument,
    client_root: ClientRootOption = None,
    roots: RootOption = None,
    user_root: UserRootOption = None,
    mode: ModeOption = ModeChoice.build,
    base: BaseOption = "/",
    output: OutputOption = None,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Compose the index.html document of a deck."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    emitter = CliEmitter(state=state)

    resolved_user_root = user_root or entry.parent
    ordered_roots = [*(roots or []), resolved_user_root]

    try:
        options = IndexHtmlOptions(
            mode=mode.value,
            entry=entry,
            client_root=client_root or builtin_client_root(),
            user_root=resolved_user_root,
            roots=list(dict.fromkeys(ordered_roots)),
            data=load_deck(entry),
            base=base,
        )
        html = setup_index_html(options, emitter=emitter)
    except IndexHtmlError as exc:
        if debug:
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if output is None:
        sys.stdout.write(html)
        if not html.endswith("\n"):
            sys.stdout.write("\n")
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    state.err_console.print(f"Wrote {output}")


__all__ = ["render"]
