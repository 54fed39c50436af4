"""Normalize JSON-LD author shapes into a display string."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from .config import AUTHOR_SEPARATOR, MAX_NESTING_DEPTH
from .models import AuthorList, AuthorReference, AuthorText, AuthorValue
from .utils import clean_text


def _text_field(node: Mapping, key: str) -> Optional[str]:
    value = node.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def to_author_value(raw: Any, depth: int = 0) -> Optional[AuthorValue]:
    """Tag a raw JSON value found under an author-like key.

    Returns ``None`` for empty values and for shapes that can never carry
    a name (numbers, booleans). Lists nested deeper than
    ``MAX_NESTING_DEPTH`` are dropped.
    """
    if not raw or depth > MAX_NESTING_DEPTH:
        return None
    if isinstance(raw, str):
        return AuthorText(raw)
    if isinstance(raw, (list, tuple)):
        items = []
        for item in raw:
            tagged = to_author_value(item, depth + 1)
            if tagged is not None:
                items.append(tagged)
        return AuthorList(tuple(items))
    if isinstance(raw, Mapping):
        return AuthorReference(
            name=_text_field(raw, "name"),
            given_name=_text_field(raw, "givenName"),
            family_name=_text_field(raw, "familyName"),
            alternate_name=_text_field(raw, "alternateName"),
            identifier=_text_field(raw, "@id"),
        )
    return None


def _reference_name(ref: AuthorReference) -> Optional[str]:
    if ref.name:
        return clean_text(ref.name)
    if ref.given_name and ref.family_name:
        return clean_text(f"{ref.given_name} {ref.family_name}")
    if ref.alternate_name:
        return clean_text(ref.alternate_name)
    # A bare @id points at an entity described elsewhere; it is not a name.
    return None


def resolve_author_value(
    value: Optional[AuthorValue],
    separator: str = AUTHOR_SEPARATOR,
) -> Optional[str]:
    """Reduce a tagged author value to a display name."""
    if value is None:
        return None
    if isinstance(value, AuthorText):
        return clean_text(value.text)
    if isinstance(value, AuthorList):
        names: List[str] = []
        for item in value.items:
            name = resolve_author_value(item, separator)
            if name:
                names.append(name)
        return separator.join(names) if names else None
    if isinstance(value, AuthorReference):
        return _reference_name(value)
    return None


def extract_author_name(value: Any, separator: str = AUTHOR_SEPARATOR) -> Optional[str]:
    """Return the author name(s) held by ``value`` or ``None``.

    Strings are trimmed, Person/Organization objects resolve through
    ``name``, then ``givenName`` + ``familyName``, then ``alternateName``,
    and lists join every resolvable entry with ``separator``.
    """
    return resolve_author_value(to_author_value(value), separator)
