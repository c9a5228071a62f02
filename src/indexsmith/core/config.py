"""Configuration models describing a deck and how its index.html is built.

FontsConfig

`sans`, `serif`, `mono` (`list[str]`)
: Font families per role. Comma separated strings are split and trimmed.

`local` (`list[str]`)
: Families available locally; they are never requested from a provider.

`weights` (`list[str]`)
: Weights requested from the web font provider. Defaults to `200,400,600`.

`italic` (`bool`)
: Also request the italic axis for every weight.

`provider` (`str`)
: Web font provider. `google` and `coollabs` produce a stylesheet link,
  `none` disables web fonts, anything else is ignored.

`webfonts` (`list[str]`)
: Families requested from the provider. Derived from `sans`, `serif` and
  `mono` when omitted and `fallbacks` is enabled.

DeckConfig

`title` (`str`)
: Inline Markdown title of the deck.

`title_template` (`str`)
: Template for the document title, `%s` is replaced by the rendered title.

`favicon` (`str`)
: URL or path of the favicon linked from the document head.

SeoMeta

Open Graph and Twitter card values (`og_title`, `og_description`, `og_image`,
`og_url`, `twitter_card`, `twitter_site`, `twitter_title`,
`twitter_description`, `twitter_image`, `twitter_url`). The camelCase spelling
used in headmatter (`ogTitle`, ...) is accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from indexsmith.core.exceptions import DeckConfigError


DEFAULT_TITLE = "Slidev"
DEFAULT_TITLE_TEMPLATE = "%s - Slidev"
DEFAULT_FAVICON = "https://cdn.jsdelivr.net/gh/slidevjs/slidev/assets/favicon.png"
DEFAULT_FONT_WEIGHTS = ("200", "400", "600")

Mode = Literal["dev", "build"]


def _split_font_list(value: Any) -> list[str]:
    if value is None:
        return []
    items = [value] if isinstance(value, (str, int)) else list(value)
    result: list[str] = []
    for item in items:
        for part in str(item).split(","):
            stripped = part.strip()
            if stripped:
                result.append(stripped)
    return result


class FontsConfig(BaseModel):
    """Font families and web font provider settings."""

    model_config = ConfigDict(extra="ignore")

    sans: list[str] = Field(default_factory=list)
    serif: list[str] = Field(default_factory=list)
    mono: list[str] = Field(default_factory=list)
    local: list[str] = Field(default_factory=list)
    weights: list[str] = Field(default_factory=lambda: list(DEFAULT_FONT_WEIGHTS))
    italic: bool = False
    provider: str = "google"
    fallbacks: bool = True
    webfonts: list[str] | None = None

    @field_validator("sans", "serif", "mono", "local", mode="before")
    @classmethod
    def _coerce_families(cls, value: Any) -> list[str]:
        return _split_font_list(value)

    @field_validator("weights", mode="before")
    @classmethod
    def _coerce_weights(cls, value: Any) -> list[str]:
        weights = _split_font_list(value)
        return weights or list(DEFAULT_FONT_WEIGHTS)

    @field_validator("webfonts", mode="before")
    @classmethod
    def _coerce_webfonts(cls, value: Any) -> list[str] | None:
        if value is None:
            return None
        return _split_font_list(value)

    @model_validator(mode="after")
    def derive_webfonts(self) -> FontsConfig:
        """Populate the requested web fonts from the declared families."""
        if self.provider == "none":
            self.webfonts = []
            return self
        if self.webfonts is None:
            candidates = [*self.sans, *self.serif, *self.mono] if self.fallbacks else []
            self.webfonts = list(dict.fromkeys(candidates))
        self.webfonts = [font for font in self.webfonts if font not in self.local]
        return self


class DeckFeatures(BaseModel):
    """Feature flags detected in the deck source."""

    model_config = ConfigDict(extra="forbid")

    tweet: bool = False


class DeckConfig(BaseModel):
    """Resolved deck level configuration."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = DEFAULT_TITLE
    title_template: str = Field(default=DEFAULT_TITLE_TEMPLATE, alias="titleTemplate")
    favicon: str = DEFAULT_FAVICON
    fonts: FontsConfig = Field(default_factory=FontsConfig)


class SeoMeta(BaseModel):
    """Open Graph and Twitter card overrides."""

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_url: str | None = None
    twitter_card: str | None = None
    twitter_site: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    twitter_url: str | None = None


class Headmatter(BaseModel):
    """Free-form metadata declared at the top of the deck."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    lang: str | None = None
    title: str | None = None
    info: str | None = None
    author: str | None = None
    keywords: str | list[str] | None = None
    seo_meta: SeoMeta = Field(
        default_factory=SeoMeta,
        validation_alias=AliasChoices("seoMeta", "seo_meta"),
    )

    @field_validator("lang", "title", "info", "author", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None or value is False:
            return None
        return value if isinstance(value, str) else str(value)

    @field_validator("keywords", mode="before")
    @classmethod
    def _coerce_keywords(cls, value: Any) -> str | list[str] | None:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return str(value)

    @field_validator("seo_meta", mode="before")
    @classmethod
    def _coerce_seo_meta(cls, value: Any) -> Any:
        return {} if value is None else value


class DeckData(BaseModel):
    """Everything known about a deck that influences its index.html."""

    model_config = ConfigDict(extra="forbid")

    headmatter: Headmatter = Field(default_factory=Headmatter)
    config: DeckConfig = Field(default_factory=DeckConfig)
    features: DeckFeatures = Field(default_factory=DeckFeatures)


class IndexHtmlOptions(BaseModel):
    """Inputs of a single index.html composition."""

    model_config = ConfigDict(extra="forbid")

    mode: Mode = "build"
    entry: Path
    client_root: Path
    user_root: Path
    roots: list[Path] = Field(default_factory=list)
    data: DeckData = Field(default_factory=DeckData)
    base: str | None = None


_CONFIG_KEYS = ("title", "titleTemplate", "favicon", "fonts")


def resolve_deck_config(headmatter: Headmatter | Mapping[str, Any]) -> DeckConfig:
    """Build the deck configuration from the keys declared in headmatter."""
    source: Mapping[str, Any] = (
        headmatter.model_dump() if isinstance(headmatter, Headmatter) else headmatter
    )

    payload = {key: source[key] for key in _CONFIG_KEYS if source.get(key) is not None}
    try:
        return DeckConfig.model_validate(payload)
    except ValidationError as exc:
        raise DeckConfigError(f"Invalid deck configuration: {exc}") from exc


def parse_headmatter(payload: Mapping[str, Any] | None) -> Headmatter:
    """Validate raw headmatter, raising DeckConfigError on invalid values."""
    try:
        return Headmatter.model_validate(dict(payload or {}))
    except ValidationError as exc:
        raise DeckConfigError(f"Invalid headmatter: {exc}") from exc


__all__ = [
    "DEFAULT_FAVICON",
    "DEFAULT_TITLE",
    "DEFAULT_TITLE_TEMPLATE",
    "DeckConfig",
    "DeckData",
    "DeckFeatures",
    "FontsConfig",
    "Headmatter",
    "IndexHtmlOptions",
    "Mode",
    "SeoMeta",
    "parse_headmatter",
    "resolve_deck_config",
]
