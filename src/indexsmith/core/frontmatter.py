"""Read deck headmatter and feature flags from a Markdown entry."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from indexsmith.core.config import (
    DeckData,
    DeckFeatures,
    parse_headmatter,
    resolve_deck_config,
)


def split_front_matter(source: str) -> tuple[dict[str, Any], str]:
    """Split a leading YAML block from ``source``.

    Sources without a well-formed block, or whose block is not a YAML
    mapping, are returned untouched with empty metadata.
    """
    candidate = source.lstrip("\ufeff")
    prefix_len = len(source) - len(candidate)
    lines = candidate.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, source

    front_matter_lines: list[str] = []
    closing_index: int | None = None
    for idx, line in enumerate(lines[1:], start=1):
        stripped = line.strip()
        if stripped in {"---", "..."}:
            closing_index = idx
            break
        front_matter_lines.append(line)

    if closing_index is None:
        return {}, source

    raw_block = "\n".join(front_matter_lines)
    try:
        metadata = yaml.safe_load(raw_block) or {}
    except yaml.YAMLError:
        return {}, source

    if not isinstance(metadata, dict):
        metadata = {}

    body_lines = lines[closing_index + 1 :]
    body = "\n".join(body_lines)
    if source.endswith("\n"):
        body += "\n"

    prefix = source[:prefix_len]
    return metadata, prefix + body


def detect_features(body: str) -> DeckFeatures:
    """Return the features a deck body relies on."""
    return DeckFeatures(tweet="<Tweet" in body)


def deck_data_from_mapping(
    headmatter: Mapping[str, Any] | None, body: str = ""
) -> DeckData:
    """Validate raw headmatter and derive the deck configuration from it."""
    parsed = parse_headmatter(headmatter)
    return DeckData(
        headmatter=parsed,
        config=resolve_deck_config(parsed),
        features=detect_features(body),
    )


def load_deck(entry: Path) -> DeckData:
    """Load the deck data declared by the Markdown file at ``entry``."""
    source = Path(entry).read_text(encoding="utf-8")
    metadata, body = split_front_matter(source)
    return deck_data_from_mapping(metadata, body)


__all__ = [
    "deck_data_from_mapping",
    "detect_features",
    "load_deck",
    "split_front_matter",
]
