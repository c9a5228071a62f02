"""Quoting helpers for values embedded in HTML attributes."""

from __future__ import annotations

import html
import json
from typing import Any


def to_attr_value(value: Any) -> str:
    """Return ``value`` HTML-escaped and wrapped as a double quoted literal."""
    return json.dumps(html.escape(str(value), quote=True), ensure_ascii=False)


__all__ = ["to_attr_value"]
