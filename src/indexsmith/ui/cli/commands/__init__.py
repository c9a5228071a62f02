"""Command implementations for the indexsmith CLI."""

from __future__ import annotations

from .render import render


__all__ = ["render"]
