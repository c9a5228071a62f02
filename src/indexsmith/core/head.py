"""Structured description of the document head."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from indexsmith.core.config import DeckConfig, Headmatter, Mode, SeoMeta
from indexsmith.core.escape import to_attr_value
from indexsmith.core.fonts import resolve_font_link
from indexsmith.core.resolver import slash
from indexsmith.core.title import get_slide_title
from indexsmith.version import get_version


DEFAULT_LANG = "en"


@dataclass(slots=True, frozen=True)
class LinkTag:
    """A ``<link>`` element."""

    rel: str
    href: str
    type: str | None = None

    def attrs(self) -> dict[str, str]:
        attributes = {"rel": self.rel, "href": self.href}
        if self.type:
            attributes["type"] = self.type
        return attributes


@dataclass(slots=True, frozen=True)
class MetaTag:
    """A ``<meta>`` element keyed by ``name`` or ``property``."""

    key: str
    value: str
    content: str | None

    def attrs(self) -> dict[str, str] | None:
        """Return the element attributes, or ``None`` when there is no content."""
        if not self.content:
            return None
        return {self.key: self.value, "content": self.content}


@dataclass(slots=True)
class HeadDescription:
    """Everything rendered into ``<head>`` besides the merged fragments."""

    lang: str = DEFAULT_LANG
    title: str | None = None
    links: list[LinkTag] = field(default_factory=list)
    meta: list[MetaTag] = field(default_factory=list)

    def rendered_meta(self) -> list[MetaTag]:
        """Return the meta entries that carry content."""
        return [entry for entry in self.meta if entry.content]


def _keywords_text(keywords: str | list[str] | None) -> str | None:
    if not keywords:
        return None
    if isinstance(keywords, list):
        return ", ".join(keywords)
    return keywords


def build_head_description(
    config: DeckConfig,
    headmatter: Headmatter,
    *,
    entry: str | Path,
    mode: Mode,
    seo_meta: SeoMeta | None = None,
    title: str | None = None,
    version: str | None = None,
) -> HeadDescription:
    """Assemble the head description of a deck.

    Free-text values (description, author, keywords) are escaped and quoted
    with :func:`to_attr_value`; every other value is left for the head
    renderer to escape. Entries whose content resolves to nothing are kept out
    of the rendered output.
    """
    seo = seo_meta if seo_meta is not None else headmatter.seo_meta
    title = title if title is not None else get_slide_title(config)
    description = to_attr_value(headmatter.info) if headmatter.info else None
    author = to_attr_value(headmatter.author) if headmatter.author else None
    keywords_text = _keywords_text(headmatter.keywords)
    keywords = to_attr_value(keywords_text) if keywords_text else None

    links = [LinkTag(rel="icon", href=config.favicon)]
    font_link = resolve_font_link(config.fonts)
    if font_link is not None:
        links.append(LinkTag(rel=font_link.rel, href=font_link.href, type=font_link.type))

    meta = [
        MetaTag("property", "slidev:version", version or get_version()),
        MetaTag("property", "slidev:entry", slash(entry) if mode == "dev" else None),
        MetaTag("name", "description", description),
        MetaTag("name", "author", author),
        MetaTag("name", "keywords", keywords),
        MetaTag("property", "og:title", seo.og_title or title),
        MetaTag("property", "og:description", seo.og_description or description),
        MetaTag("property", "og:image", seo.og_image),
        MetaTag("property", "og:url", seo.og_url),
        MetaTag("property", "twitter:card", seo.twitter_card),
        MetaTag("property", "twitter:site", seo.twitter_site),
        MetaTag("property", "twitter:title", seo.twitter_title),
        MetaTag("property", "twitter:description", seo.twitter_description),
        MetaTag("property", "twitter:image", seo.twitter_image),
        MetaTag("property", "twitter:url", seo.twitter_url),
    ]

    return HeadDescription(
        lang=headmatter.lang or DEFAULT_LANG,
        title=title,
        links=links,
        meta=meta,
    )


__all__ = [
    "DEFAULT_LANG",
    "HeadDescription",
    "LinkTag",
    "MetaTag",
    "build_head_description",
]
