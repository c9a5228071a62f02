"""Serialise a head description into an HTML template."""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag
from bs4.formatter import HTMLFormatter

from indexsmith.core.head import HeadDescription


_HTML_OPEN = re.compile(r"<html\b[^>]*>", re.IGNORECASE)
_HEAD_OPEN = re.compile(r"<head\b[^>]*>", re.IGNORECASE)
_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)
_TITLE = re.compile(r"<title\b[^>]*>.*?</title\s*>", re.IGNORECASE | re.DOTALL)
_META_CHARSET = re.compile(r"<meta\b[^>]*\bcharset\s*=[^>]*>", re.IGNORECASE)
_LANG_ATTR = re.compile(r"""\slang\s*=\s*("[^"]*"|'[^']*'|[^\s>]+)""", re.IGNORECASE)
_DOCTYPE = re.compile(r"<!doctype\b[^>]*>", re.IGNORECASE)


def _escape_quotes(value: str) -> str:
    return value.replace('"', "&quot;")


class _AttributeFormatter(HTMLFormatter):
    """Keep attribute order and only encode double quotes in values."""

    def __init__(self) -> None:
        super().__init__(entity_substitution=_escape_quotes, void_element_close_prefix=None)

    def attributes(self, tag: Tag):
        return list(tag.attrs.items())


_ATTRIBUTES = _AttributeFormatter()


@runtime_checkable
class HeadRenderer(Protocol):
    """Capability rendering a head description into a template string."""

    def render(self, description: HeadDescription, template: str) -> str: ...


class SoupHeadRenderer:
    """Head renderer backed by BeautifulSoup.

    BeautifulSoup only builds the new ``<title>``, ``<link>`` and ``<meta>``
    elements; they are spliced into the template text, which is otherwise left
    byte for byte as given. The ``<html lang>`` attribute is set in place, an
    existing ``<title>`` inside ``<head>`` is replaced, and the new elements go
    right after the ``<meta charset>`` declaration, or after ``<head>``.
    Attribute values only get their double quotes encoded: free-text values
    arrive already escaped.
    """

    def __init__(self) -> None:
        self._soup = BeautifulSoup("", "html.parser")

    def render(self, description: HeadDescription, template: str) -> str:
        html = self._set_lang(template, description.lang)

        elements: list[str] = []
        if description.title is not None:
            title = self._title_markup(description.title)
            html, replaced = self._replace_title(html, title)
            if not replaced:
                elements.append(title)

        for link in description.links:
            if link.href:
                elements.append(self._element_markup("link", link.attrs()))

        for meta in description.rendered_meta():
            attrs = meta.attrs()
            if attrs is not None:
                elements.append(self._element_markup("meta", attrs))

        if not elements:
            return html
        return self._insert_elements(html, "".join(f"\n{element}" for element in elements))

    def _element_markup(self, name: str, attrs: dict[str, str]) -> str:
        return self._soup.new_tag(name, attrs=attrs).decode(formatter=_ATTRIBUTES)

    def _title_markup(self, title: str) -> str:
        tag = self._soup.new_tag("title")
        tag.string = title
        return tag.decode(formatter="minimal")

    @staticmethod
    def _set_lang(html: str, lang: str) -> str:
        match = _HTML_OPEN.search(html)
        if match is None:
            return html
        attribute = f' lang="{_escape_quotes(lang)}"'
        opening = match.group(0)
        if _LANG_ATTR.search(opening):
            updated = _LANG_ATTR.sub(lambda _: attribute, opening, count=1)
        else:
            updated = f"{opening[:5]}{attribute}{opening[5:]}"
        return html[: match.start()] + updated + html[match.end() :]

    @staticmethod
    def _head_span(html: str) -> tuple[int, int] | None:
        opening = _HEAD_OPEN.search(html)
        if opening is None:
            return None
        closing = _HEAD_CLOSE.search(html, opening.end())
        return opening.end(), closing.start() if closing else len(html)

    def _replace_title(self, html: str, title: str) -> tuple[str, bool]:
        span = self._head_span(html)
        if span is None:
            return html, False
        match = _TITLE.search(html, *span)
        if match is None:
            return html, False
        return html[: match.start()] + title + html[match.end() :], True

    def _insert_elements(self, html: str, block: str) -> str:
        span = self._head_span(html)
        if span is None:
            anchor = _HTML_OPEN.search(html) or _DOCTYPE.search(html)
            position = anchor.end() if anchor else 0
            return f"{html[:position]}<head>{block}\n</head>{html[position:]}"

        position = span[0]
        for match in _META_CHARSET.finditer(html, *span):
            position = match.end()
        return html[:position] + block + html[position:]


__all__ = ["HeadRenderer", "SoupHeadRenderer"]
