"""Page metadata rules and the default extraction pipeline."""

from __future__ import annotations

from typing import Optional

from readability import Document

from .config import ExtractionConfig
from .models import PageMetadata
from .pipeline import MetadataPipeline, PageContext, RuleBundle
from .rules import author_jsonld_rules


def _meta_content(context: PageContext, **attrs: str) -> Optional[str]:
    tag = context.soup.find("meta", attrs=attrs)
    if tag and tag.get("content"):
        return tag["content"].strip()
    return None


def _meta_author(context: PageContext) -> Optional[str]:
    return _meta_content(context, name="author")


def _meta_article_author(context: PageContext) -> Optional[str]:
    return _meta_content(context, property="article:author")


def _readability_title(context: PageContext) -> Optional[str]:
    return Document(context.html).short_title()


def _html_title(context: PageContext) -> Optional[str]:
    if context.soup.title and context.soup.title.string:
        return context.soup.title.string.strip()
    return None


def _og_title(context: PageContext) -> Optional[str]:
    return _meta_content(context, property="og:title")


def _meta_description(context: PageContext) -> Optional[str]:
    return _meta_content(context, name="description")


def _og_description(context: PageContext) -> Optional[str]:
    return _meta_content(context, property="og:description")


def meta_author_rules() -> RuleBundle:
    """Author fallbacks read from ``<meta>`` tags."""
    return {"author": [_meta_author, _meta_article_author]}


def title_rules() -> RuleBundle:
    return {"title": [_og_title, _readability_title, _html_title]}


def description_rules() -> RuleBundle:
    return {"description": [_meta_description, _og_description]}


def default_pipeline(config: Optional[ExtractionConfig] = None) -> MetadataPipeline:
    """JSON-LD author first, then meta-tag fallbacks, plus title and description."""
    return MetadataPipeline(
        [
            author_jsonld_rules(config),
            meta_author_rules(),
            title_rules(),
            description_rules(),
        ]
    )


def extract_metadata(
    html: str,
    source_url: Optional[str] = None,
    pipeline: Optional[MetadataPipeline] = None,
) -> PageMetadata:
    """Resolve title, description and author for one page."""
    pipeline = pipeline or default_pipeline()
    fields = pipeline.run(html, source_url)
    return PageMetadata(
        source_url=source_url,
        title=fields.get("title"),
        description=fields.get("description"),
        author=fields.get("author"),
    )
