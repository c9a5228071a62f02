"""Merge ``index.html`` fragments contributed by override roots.

Each root may ship an ``index.html`` whose ``<head>`` and ``<body>`` inner
content is layered onto the base client template. Extraction is a first-match
search on the literal tag boundaries, not an HTML parse: malformed or unclosed
tags contribute nothing for that side.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
from pathlib import Path
import re

from indexsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter


logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"

_HEAD_PATTERN = re.compile(r"<head>(.*?)</head>", re.IGNORECASE | re.DOTALL)
_BODY_PATTERN = re.compile(r"<body>(.*?)</body>", re.IGNORECASE | re.DOTALL)
_DOCTYPE_MARKER = "<!doctype"


@dataclass(slots=True, frozen=True)
class Fragment:
    """Inner ``<head>`` and ``<body>`` content of one root."""

    head: str = ""
    body: str = ""


def _first_inner(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(1).strip() if match else ""


def extract_fragment(text: str) -> Fragment:
    """Return the trimmed inner content of the first head and body elements."""
    return Fragment(head=_first_inner(_HEAD_PATTERN, text), body=_first_inner(_BODY_PATTERN, text))


def has_doctype(text: str) -> bool:
    """Return whether ``text`` carries a doctype declaration."""
    return _DOCTYPE_MARKER in text.lower()


def _same_root(left: Path, right: Path | None) -> bool:
    if right is None:
        return False
    return Path(left) == Path(right)


def read_fragment(
    root: Path,
    *,
    is_user_root: bool = False,
    emitter: DiagnosticEmitter | None = None,
) -> Fragment | None:
    """Read the fragment of ``root`` or return ``None`` when it contributes nothing."""
    path = Path(root) / INDEX_FILENAME
    if not path.is_file():
        return None

    text = path.read_text(encoding="utf-8", errors="replace")

    if is_user_root and has_doctype(text):
        emitter = emitter or LoggingEmitter(logger_obj=logger)
        emitter.warning(
            f"Ignored provided index.html with doctype declaration. ({path})\n"
            "This file may have been generated by a previous build, "
            "please remove it from your project."
        )
        return None

    return extract_fragment(text)


def merge_fragments(
    roots: Iterable[Path],
    user_root: Path | None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> tuple[str, str]:
    """Concatenate the fragments of ``roots`` in order.

    Every contributing root appends its head and body on a new line, so the
    result for N contributing roots holds N newline-prefixed entries per side.
    """
    emitter = emitter or LoggingEmitter(logger_obj=logger)
    head = ""
    body = ""
    for root in roots:
        fragment = read_fragment(
            Path(root),
            is_user_root=_same_root(Path(root), user_root),
            emitter=emitter,
        )
        if fragment is None:
            continue
        emitter.event(
            "fragment_merged",
            {
                "path": str(Path(root) / INDEX_FILENAME),
                "head": bool(fragment.head),
                "body": bool(fragment.body),
            },
        )
        head += f"\n{fragment.head}"
        body += f"\n{fragment.body}"
    return head, body


__all__ = [
    "INDEX_FILENAME",
    "Fragment",
    "extract_fragment",
    "has_doctype",
    "merge_fragments",
    "read_fragment",
]
