"""Web font stylesheet links for the document head."""

from __future__ import annotations

from dataclasses import dataclass
import re

from indexsmith.core.config import FontsConfig


GOOGLE_FONTS_CSS = "https://fonts.googleapis.com/css2"
COOLLABS_FONTS_CSS = "https://api.fonts.coollabs.io/css2"

_QUOTED = re.compile(r"""^(['"])(.*)\1$""")
_WHITESPACE = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class FontLink:
    """Stylesheet link pointing at a web font provider."""

    rel: str
    href: str
    type: str


def _family_query(family: str) -> str:
    name = _QUOTED.sub(r"\2", family.strip())
    return _WHITESPACE.sub("+", name)


def _fonts_query(fonts: FontsConfig) -> str:
    if fonts.italic:
        axes = [f"{style},{weight}" for weight in fonts.weights for style in ("0", "1")]
    else:
        axes = list(fonts.weights)
    weights = ";".join(sorted(axes))
    axis = "ital,wght" if fonts.italic else "wght"
    families = "&".join(
        f"family={_family_query(family)}:{axis}@{weights}" for family in fonts.webfonts or []
    )
    return f"{families}&display=swap"


def generate_google_fonts_url(fonts: FontsConfig) -> str:
    """Return the Google Fonts stylesheet URL for the requested web fonts."""
    return f"{GOOGLE_FONTS_CSS}?{_fonts_query(fonts)}"


def generate_coollabs_fonts_url(fonts: FontsConfig) -> str:
    """Return the CoolLabs Fonts stylesheet URL for the requested web fonts."""
    return f"{COOLLABS_FONTS_CSS}?{_fonts_query(fonts)}"


_PROVIDERS = {
    "google": generate_google_fonts_url,
    "coollabs": generate_coollabs_fonts_url,
}


def resolve_font_link(fonts: FontsConfig) -> FontLink | None:
    """Return the stylesheet link for the configured provider, if any.

    Nothing is linked when no web font is requested or when the provider is
    not one of ``google`` or ``coollabs``.
    """
    if not fonts.webfonts:
        return None
    builder = _PROVIDERS.get(fonts.provider)
    if builder is None:
        return None
    return FontLink(rel="stylesheet", href=builder(fonts), type="text/css")


__all__ = [
    "COOLLABS_FONTS_CSS",
    "GOOGLE_FONTS_CSS",
    "FontLink",
    "generate_coollabs_fonts_url",
    "generate_google_fonts_url",
    "resolve_font_link",
]
