"""Data models used throughout the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class AuthorText:
    """Author given as a bare string."""

    text: str


@dataclass(frozen=True)
class AuthorReference:
    """Person or Organization object found under an author-like key."""

    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    alternate_name: Optional[str] = None
    identifier: Optional[str] = None


@dataclass(frozen=True)
class AuthorList:
    """Ordered collection of author values."""

    items: Tuple["AuthorValue", ...]


AuthorValue = Union[AuthorText, AuthorReference, AuthorList]


class ExtractionFault(Exception):
    """Internal failure raised while walking a JSON-LD payload."""

    MALFORMED_PAYLOAD = "malformed-payload"
    UNEXPECTED_SHAPE = "unexpected-shape"
    LOCATOR = "locator"

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass
class ExtractionOutcome:
    """Either a resolved author, nothing, or a captured fault."""

    author: Optional[str] = None
    fault: Optional[ExtractionFault] = None

    @property
    def found(self) -> bool:
        return self.author is not None


@dataclass
class PageMetadata:
    """Metadata describing the extracted page."""

    source_url: Optional[str]
    title: Optional[str]
    description: Optional[str]
    author: Optional[str]
