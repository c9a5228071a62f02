"""Exception hierarchy for the index.html composition pipeline."""

from __future__ import annotations

from pathlib import Path


class IndexHtmlError(RuntimeError):
    """Base exception for document shell composition failures."""


class TemplateNotFoundError(IndexHtmlError):
    """Raised when the base client template cannot be read."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = Path(path)
        message = f"Base template not found: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DeckConfigError(IndexHtmlError, ValueError):
    """Raised when deck configuration or headmatter values are invalid."""


__all__ = [
    "DeckConfigError",
    "IndexHtmlError",
    "TemplateNotFoundError",
]
