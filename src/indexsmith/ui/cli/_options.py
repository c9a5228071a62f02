"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
RENDERING_PANEL = "Rendering"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"


class ModeChoice(str, Enum):
    """Run modes accepted on the command line."""

    dev = "dev"
    build = "build"


EntryArgument = Annotated[
    Path,
    typer.Argument(
        metavar="ENTRY",
        help="Deck Markdown file whose headmatter describes the document.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ClientRootOption = Annotated[
    Path | None,
    typer.Option(
        "--client-root",
        help="Directory holding the base index.html (defaults to the built-in client).",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

RootOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--root",
        "-r",
        help="Theme or addon root layered before the user root. Repeat to add more.",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

UserRootOption = Annotated[
    Path | None,
    typer.Option(
        "--user-root",
        help="Deck project root (defaults to the directory of ENTRY).",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ModeOption = Annotated[
    ModeChoice,
    typer.Option(
        "--mode",
        "-m",
        help="Run mode; dev mode exposes the entry path and prefixes the base path.",
        case_sensitive=False,
        rich_help_panel=RENDERING_PANEL,
    ),
]

BaseOption = Annotated[
    str,
    typer.Option(
        "--base",
        help="Public base path the deck is served from.",
        rich_help_panel=RENDERING_PANEL,
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the document to this file instead of stdout.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic output. Repeat for more detail.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks on failure.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "BaseOption",
    "ClientRootOption",
    "DebugOption",
    "EntryArgument",
    "ModeChoice",
    "ModeOption",
    "OutputOption",
    "RootOption",
    "UserRootOption",
    "VerbosityOption",
]
