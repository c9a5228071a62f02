from __future__ import annotations

from pathlib import Path

from indexsmith.core.config import DeckConfig, FontsConfig, Headmatter, SeoMeta
from indexsmith.core.escape import to_attr_value
from indexsmith.core.head import HeadDescription, LinkTag, MetaTag, build_head_description
from indexsmith.version import get_version


def _meta(description: HeadDescription) -> dict[str, str]:
    return {entry.value: entry.content for entry in description.rendered_meta()}


def _build(
    headmatter: dict | None = None,
    *,
    config: DeckConfig | None = None,
    mode: str = "build",
    **kwargs,
) -> HeadDescription:
    return build_head_description(
        config or DeckConfig(),
        Headmatter.model_validate(headmatter or {}),
        entry=Path("/decks/talk/slides.md"),
        mode=mode,
        **kwargs,
    )


def test_minimal_description() -> None:
    description = _build()

    assert description.lang == "en"
    assert description.title == "Slidev"
    assert description.links == [LinkTag(rel="icon", href=DeckConfig().favicon)]
    assert _meta(description) == {"slidev:version": get_version(), "og:title": "Slidev"}


def test_lang_from_headmatter() -> None:
    assert _build({"lang": "fr"}).lang == "fr"


def test_free_text_fields_are_escaped() -> None:
    description = _build({"info": "Fish & <chips>", "author": "Ada 'L'", "keywords": "talk"})
    meta = _meta(description)

    assert meta["description"] == to_attr_value("Fish & <chips>")
    assert meta["author"] == to_attr_value("Ada 'L'")
    assert meta["keywords"] == to_attr_value("talk")
    assert meta["og:description"] == meta["description"]


def test_keywords_list_joined() -> None:
    assert _meta(_build({"keywords": ["a", "b"]}))["keywords"] == to_attr_value("a, b")


def test_og_title_falls_back_to_title() -> None:
    config = DeckConfig(title="Intro")

    assert _meta(_build(config=config))["og:title"] == "Intro - Slidev"
    assert _meta(_build({"seoMeta": {"ogTitle": "Shared"}}, config=config))["og:title"] == "Shared"


def test_explicit_seo_meta_argument_wins() -> None:
    description = _build(
        {"seoMeta": {"ogTitle": "From headmatter"}},
        seo_meta=SeoMeta(og_title="Explicit", og_description="Desc"),
    )

    assert _meta(description)["og:title"] == "Explicit"
    assert _meta(description)["og:description"] == "Desc"


def test_social_fields_without_fallback() -> None:
    meta = _meta(
        _build(
            {
                "seoMeta": {
                    "ogImage": "https://example.com/cover.png",
                    "ogUrl": "https://example.com",
                    "twitterCard": "summary",
                    "twitterSite": "@deck",
                }
            }
        )
    )

    assert meta["og:image"] == "https://example.com/cover.png"
    assert meta["og:url"] == "https://example.com"
    assert meta["twitter:card"] == "summary"
    assert meta["twitter:site"] == "@deck"
    assert "twitter:title" not in meta
    assert "twitter:description" not in meta
    assert "twitter:image" not in meta


def test_entry_meta_only_in_dev_mode() -> None:
    assert "slidev:entry" not in _meta(_build(mode="build"))
    assert _meta(_build(mode="dev"))["slidev:entry"] == "/decks/talk/slides.md"


def test_entry_path_uses_forward_slashes() -> None:
    description = build_head_description(
        DeckConfig(),
        Headmatter(),
        entry="C:\\decks\\slides.md",
        mode="dev",
    )

    assert _meta(description)["slidev:entry"] == "C:/decks/slides.md"


def test_font_link_follows_favicon() -> None:
    config = DeckConfig(favicon="/icon.png", fonts=FontsConfig(sans="Inter"))

    links = _build(config=config).links

    assert [link.rel for link in links] == ["icon", "stylesheet"]
    assert links[0].href == "/icon.png"
    assert links[1].type == "text/css"
    assert "family=Inter" in links[1].href


def test_meta_order_and_empty_entries() -> None:
    description = _build(
        {"info": "About", "author": "", "seoMeta": {"twitterUrl": "https://x.test"}},
        mode="dev",
        title="Fixed",
        version="9.9.9",
    )

    assert [entry.value for entry in description.rendered_meta()] == [
        "slidev:version",
        "slidev:entry",
        "description",
        "og:title",
        "og:description",
        "twitter:url",
    ]
    assert _meta(description)["slidev:version"] == "9.9.9"
    assert description.title == "Fixed"


def test_meta_tag_attributes() -> None:
    assert MetaTag("name", "author", None).attrs() is None
    assert MetaTag("name", "author", "").attrs() is None
    assert MetaTag("property", "og:url", "u").attrs() == {"property": "og:url", "content": "u"}
