"""Core composition pipeline for the deck index.html."""

from __future__ import annotations

from .assembler import assemble, load_base_template, setup_index_html
from .config import (
    DeckConfig,
    DeckData,
    DeckFeatures,
    FontsConfig,
    Headmatter,
    IndexHtmlOptions,
    SeoMeta,
    resolve_deck_config,
)
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .escape import to_attr_value
from .exceptions import DeckConfigError, IndexHtmlError, TemplateNotFoundError
from .fonts import FontLink, resolve_font_link
from .fragments import Fragment, extract_fragment, merge_fragments
from .frontmatter import load_deck, split_front_matter
from .head import HeadDescription, LinkTag, MetaTag, build_head_description
from .renderer import HeadRenderer, SoupHeadRenderer
from .resolver import slash, to_at_fs
from .title import get_slide_title


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
    "assemble",
    "build_head_description",
    "extract_fragment",
    "get_slide_title",
    "load_base_template",
    "load_deck",
    "merge_fragments",
    "resolve_deck_config",
    "resolve_font_link",
    "setup_index_html",
    "slash",
    "split_front_matter",
    "to_at_fs",
    "to_attr_value",
]
