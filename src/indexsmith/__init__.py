"""Compose the index.html document shell of a presentation deck."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version
from importlib.resources import files
from pathlib import Path

from indexsmith.core import (
    DeckConfig,
    DeckConfigError,
    DeckData,
    DeckFeatures,
    DiagnosticEmitter,
    FontLink,
    FontsConfig,
    Fragment,
    HeadDescription,
    HeadRenderer,
    Headmatter,
    IndexHtmlError,
    IndexHtmlOptions,
    LinkTag,
    LoggingEmitter,
    MetaTag,
    NullEmitter,
    SeoMeta,
    SoupHeadRenderer,
    TemplateNotFoundError,
    assemble,
    build_head_description,
    extract_fragment,
    get_slide_title,
    load_base_template,
    load_deck,
    merge_fragments,
    resolve_deck_config,
    resolve_font_link,
    setup_index_html,
    to_attr_value,
)
from indexsmith.version import get_version


try:
    __version__ = _pkg_version("indexsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"


def builtin_client_root() -> Path:
    """Return the directory holding the built-in client template."""
    return Path(str(files("indexsmith") / "client"))


__all__ = [
    "DeckConfig",
    "DeckConfigError",
    "DeckData",
    "DeckFeatures",
    "DiagnosticEmitter",
    "FontLink",
    "FontsConfig",
    "Fragment",
    "HeadDescription",
    "HeadRenderer",
    "Headmatter",
    "IndexHtmlError",
    "IndexHtmlOptions",
    "LinkTag",
    "LoggingEmitter",
    "MetaTag",
    "NullEmitter",
    "SeoMeta",
    "SoupHeadRenderer",
    "TemplateNotFoundError",
    "__version__",
    "assemble",
    "build_head_description",
    "builtin_client_root",
    "extract_fragment",
    "get_slide_title",
    "get_version",
    "load_base_template",
    "load_deck",
    "merge_fragments",
    "resolve_deck_config",
    "resolve_font_link",
    "setup_index_html",
    "to_attr_value",
]
