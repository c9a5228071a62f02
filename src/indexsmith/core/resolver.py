"""Map on-disk paths to the URLs the development server exposes."""

from __future__ import annotations

from pathlib import Path, PurePath


FS_PREFIX = "/@fs"


def slash(path: str | PurePath) -> str:
    """Return ``path`` with forward slashes only."""
    return str(path).replace("\\", "/")


def to_at_fs(path: str | Path) -> str:
    """Return the ``/@fs`` URL serving the file at ``path``."""
    value = slash(path)
    if not value.startswith("/"):
        value = f"/{value}"
    return f"{FS_PREFIX}{value}"


__all__ = ["FS_PREFIX", "slash", "to_at_fs"]
