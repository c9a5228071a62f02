"""Compute the document title of a deck."""

from __future__ import annotations

from bs4 import BeautifulSoup
import markdown

from indexsmith.core.config import DEFAULT_TITLE, DeckConfig


def stringify_inline_markdown(source: str) -> str:
    """Render inline Markdown and keep only its text content."""
    rendered = markdown.markdown(source)
    return BeautifulSoup(rendered, "html.parser").get_text().strip()


def get_slide_title(config: DeckConfig) -> str:
    """Return the deck title expanded through its title template."""
    title = stringify_inline_markdown(config.title)
    slide_title = config.title_template.replace("%s", title, 1)
    if slide_title == f"{DEFAULT_TITLE} - {DEFAULT_TITLE}":
        return DEFAULT_TITLE
    return slide_title


__all__ = ["get_slide_title", "stringify_inline_markdown"]
