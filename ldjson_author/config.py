"""Configuration objects and constants for JSON-LD author extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

# schema.org types whose nodes are trusted to carry authorship fields.
AUTHOR_CONTENT_TYPES: FrozenSet[str] = frozenset(
    {
        "Article",
        "NewsArticle",
        "BlogPosting",
        "ScholarlyArticle",
        "TechArticle",
        "Report",
        "Book",
        "Review",
        "CreativeWork",
        "WebPage",
        "VideoObject",
        "Course",
        "Dataset",
        "SoftwareSourceCode",
        "WebSite",
        "MediaObject",
    }
)

AUTHOR_FIELDS: Tuple[str, ...] = ("author", "creator", "contributor")
AUTHOR_SEPARATOR = ", "

# Arrays nested deeper than this resolve to nothing.
MAX_NESTING_DEPTH = 32


@dataclass
class ExtractionConfig:
    """Top-level settings that control extraction and page rendering."""

    content_types: FrozenSet[str] = AUTHOR_CONTENT_TYPES
    author_fields: Tuple[str, ...] = AUTHOR_FIELDS
    separator: str = AUTHOR_SEPARATOR
    wait_after_load: float = 1.0
    navigation_timeout: float = 30.0
