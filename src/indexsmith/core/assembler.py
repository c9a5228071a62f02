"""Compose the final index.html served to the presentation client."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

from indexsmith.core.config import IndexHtmlOptions, Mode
from indexsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from indexsmith.core.exceptions import TemplateNotFoundError
from indexsmith.core.fragments import INDEX_FILENAME, merge_fragments
from indexsmith.core.head import HeadDescription, build_head_description
from indexsmith.core.renderer import HeadRenderer, SoupHeadRenderer
from indexsmith.core.resolver import to_at_fs


logger = logging.getLogger(__name__)

ENTRY_PLACEHOLDER = "__ENTRY__"
HEAD_PLACEHOLDER = "<!-- head -->"
BODY_PLACEHOLDER = "<!-- body -->"
CLIENT_ENTRY = "main.ts"
TWEET_SCRIPT = '<script async src="https://platform.twitter.com/widgets.js"></script>'

PathResolver = Callable[[Path], str]


def dev_base_prefix(mode: Mode, base: str | None) -> str:
    """Return the base path prefix applied to the entry script in dev mode."""
    if mode == "dev" and base:
        return base[:-1]
    return ""


def assemble(
    template: str,
    head: str,
    body: str,
    description: HeadDescription,
    *,
    script_path: Path,
    mode: Mode,
    base: str | None = None,
    resolver: PathResolver = to_at_fs,
    renderer: HeadRenderer | None = None,
) -> str:
    """Substitute the template placeholders and render the head description."""
    renderer = renderer or SoupHeadRenderer()
    entry_url = dev_base_prefix(mode, base) + resolver(script_path)
    html = (
        template.replace(ENTRY_PLACEHOLDER, entry_url, 1)
        .replace(HEAD_PLACEHOLDER, head, 1)
        .replace(BODY_PLACEHOLDER, body, 1)
    )
    return renderer.render(description, html)


def load_base_template(client_root: Path) -> str:
    """Read the base client template, raising when it is unavailable."""
    path = Path(client_root) / INDEX_FILENAME
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TemplateNotFoundError(path) from exc
    except OSError as exc:
        raise TemplateNotFoundError(path, reason=exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise TemplateNotFoundError(path, reason=f"not valid UTF-8: {exc.reason}") from exc


def setup_index_html(
    options: IndexHtmlOptions,
    *,
    emitter: DiagnosticEmitter | None = None,
    renderer: HeadRenderer | None = None,
    resolver: PathResolver = to_at_fs,
) -> str:
    """Build the index.html document for a deck."""
    emitter = emitter or LoggingEmitter(logger_obj=logger)
    template = load_base_template(options.client_root)
    emitter.event("template_loaded", {"path": str(options.client_root / INDEX_FILENAME)})

    head, body = merge_fragments(options.roots, options.user_root, emitter=emitter)

    data = options.data
    if data.features.tweet:
        body += f"\n{TWEET_SCRIPT}"

    description = build_head_description(
        data.config,
        data.headmatter,
        entry=options.entry,
        mode=options.mode,
    )

    return assemble(
        template,
        head,
        body,
        description,
        script_path=options.client_root / CLIENT_ENTRY,
        mode=options.mode,
        base=options.base,
        resolver=resolver,
        renderer=renderer,
    )


__all__ = [
    "BODY_PLACEHOLDER",
    "CLIENT_ENTRY",
    "ENTRY_PLACEHOLDER",
    "HEAD_PLACEHOLDER",
    "TWEET_SCRIPT",
    "assemble",
    "dev_base_prefix",
    "load_base_template",
    "setup_index_html",
]
