"""Utility helpers for string normalization."""

from __future__ import annotations

from typing import Any, Optional


def clean_text(value: Any) -> Optional[str]:
    """Return a stripped string, or ``None`` for non-strings and blank text."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None
