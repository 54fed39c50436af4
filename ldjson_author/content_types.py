"""Decide whether a JSON-LD node is the kind of content that has an author."""

from __future__ import annotations

from typing import AbstractSet, Any, List, Sequence

from .config import AUTHOR_CONTENT_TYPES


def normalize_types(raw: Any) -> List[Any]:
    """Wrap a scalar ``@type`` value into a list; pass lists through."""
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def _matches(type_name: str, entry: str) -> bool:
    return (
        type_name == entry
        or type_name.endswith(f":{entry}")
        or type_name.endswith(f"/{entry}")
    )


def is_author_content_type(
    types: Sequence[Any],
    taxonomy: AbstractSet[str] = AUTHOR_CONTENT_TYPES,
) -> bool:
    """Return True when any type is a known authorable content type.

    Accepts bare names (``Article``), prefixed names (``schema:Article``)
    and full URLs (``https://schema.org/Article``).
    """
    for type_name in types:
        if not isinstance(type_name, str):
            continue
        if type_name in taxonomy:
            return True
        if any(_matches(type_name, entry) for entry in taxonomy):
            return True
    return False
