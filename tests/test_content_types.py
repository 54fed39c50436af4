from __future__ import annotations

import pytest

from ldjson_author.content_types import is_author_content_type, normalize_types


@pytest.mark.parametrize(
    "types",
    [
        ["Article"],
        ["schema:NewsArticle"],
        ["https://schema.org/WebSite"],
        ["http://schema.org/BlogPosting"],
        ["Thing", "SoftwareSourceCode"],
    ],
)
def test_known_content_types_are_accepted(types: list) -> None:
    assert is_author_content_type(types)


@pytest.mark.parametrize(
    "types",
    [
        ["RandomThing"],
        ["Organization", "Person"],
        ["schema:ArticleSeries"],
        ["https://schema.org/Article/extra"],
        ["ArticleFoo"],
        [],
    ],
)
def test_unknown_or_partial_matches_are_rejected(types: list) -> None:
    assert not is_author_content_type(types)


def test_non_string_types_are_ignored() -> None:
    assert not is_author_content_type([None, 42, {"@id": "Article"}])
    assert is_author_content_type([None, "Report"])


def test_custom_taxonomy_replaces_default() -> None:
    assert is_author_content_type(["Recipe"], taxonomy=frozenset({"Recipe"}))
    assert not is_author_content_type(["Article"], taxonomy=frozenset({"Recipe"}))


def test_normalize_types_wraps_scalars() -> None:
    assert normalize_types("Article") == ["Article"]
    assert normalize_types(["Article", "WebPage"]) == ["Article", "WebPage"]
