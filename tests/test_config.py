from __future__ import annotations

import pytest

from indexsmith.core.config import (
    DEFAULT_FAVICON,
    DeckConfig,
    Headmatter,
    parse_headmatter,
    resolve_deck_config,
)
from indexsmith.core.exceptions import DeckConfigError


def test_defaults() -> None:
    config = DeckConfig()

    assert config.title == "Slidev"
    assert config.title_template == "%s - Slidev"
    assert config.favicon == DEFAULT_FAVICON
    assert config.fonts.provider == "google"
    assert config.fonts.webfonts == []


def test_resolve_deck_config_from_mapping() -> None:
    config = resolve_deck_config(
        {
            "title": "My *deck*",
            "titleTemplate": "%s | Conf",
            "favicon": "/favicon.svg",
            "fonts": {"sans": "Inter", "provider": "coollabs"},
            "theme": "seriph",
        }
    )

    assert config.title == "My *deck*"
    assert config.title_template == "%s | Conf"
    assert config.favicon == "/favicon.svg"
    assert config.fonts.provider == "coollabs"
    assert config.fonts.webfonts == ["Inter"]


def test_resolve_deck_config_from_headmatter_extras() -> None:
    headmatter = Headmatter.model_validate({"title": "Talk", "fonts": {"mono": "Fira Code"}})

    config = resolve_deck_config(headmatter)

    assert config.title == "Talk"
    assert config.fonts.webfonts == ["Fira Code"]


def test_invalid_deck_config_raises() -> None:
    with pytest.raises(DeckConfigError, match="Invalid deck configuration"):
        resolve_deck_config({"fonts": {"italic": "sometimes"}})


def test_headmatter_accepts_camel_case_seo_meta() -> None:
    headmatter = parse_headmatter(
        {"seoMeta": {"ogTitle": "Shared", "twitterCard": "summary_large_image"}}
    )

    assert headmatter.seo_meta.og_title == "Shared"
    assert headmatter.seo_meta.twitter_card == "summary_large_image"
    assert headmatter.seo_meta.og_url is None


def test_headmatter_coerces_scalars() -> None:
    headmatter = parse_headmatter({"author": 42, "keywords": ["a", 1], "info": None})

    assert headmatter.author == "42"
    assert headmatter.keywords == ["a", "1"]
    assert headmatter.info is None
    assert headmatter.lang is None


def test_headmatter_keeps_unknown_keys() -> None:
    headmatter = parse_headmatter({"theme": "default", "highlighter": "shiki"})

    assert headmatter.model_extra == {"theme": "default", "highlighter": "shiki"}


def test_invalid_headmatter_raises() -> None:
    with pytest.raises(DeckConfigError, match="Invalid headmatter"):
        parse_headmatter({"seoMeta": "not a mapping"})
