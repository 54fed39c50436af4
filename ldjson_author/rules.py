"""JSON-LD author rule: walk page nodes and resolve the first author found."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, List, Optional

from .authors import extract_author_name
from .config import ExtractionConfig
from .content_types import is_author_content_type, normalize_types
from .jsonld import find_jsonld
from .models import ExtractionFault, ExtractionOutcome
from .pipeline import PageContext, RuleBundle

Locator = Callable[[Any], Any]

_DEFAULT_CONFIG = ExtractionConfig()


def _author_field(node: Mapping, config: ExtractionConfig) -> Any:
    """Return the first populated author-like field, in priority order."""
    for key in config.author_fields:
        value = node.get(key)
        if value:
            return value
    return None


def _author_from_node(node: Any, config: ExtractionConfig) -> Optional[str]:
    if not isinstance(node, Mapping):
        raise ExtractionFault(
            ExtractionFault.MALFORMED_PAYLOAD,
            f"JSON-LD node is {type(node).__name__}, expected an object",
        )
    raw_type = node.get("@type")
    if not raw_type:
        return None
    if not is_author_content_type(normalize_types(raw_type), config.content_types):
        return None
    value = _author_field(node, config)
    if not value:
        return None
    return extract_author_name(value, config.separator)


def resolve_jsonld_author(
    document: Any,
    locator: Locator = find_jsonld,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionOutcome:
    """Run the extraction and report the author or the fault that stopped it."""
    config = config or _DEFAULT_CONFIG
    try:
        payload = locator(document)
    except Exception as exc:  # noqa: BLE001
        return ExtractionOutcome(fault=ExtractionFault(ExtractionFault.LOCATOR, str(exc)))
    if not payload:
        return ExtractionOutcome()

    nodes: List[Any] = list(payload) if isinstance(payload, (list, tuple)) else [payload]
    try:
        for node in nodes:
            author = _author_from_node(node, config)
            if author:
                return ExtractionOutcome(author=author)
    except ExtractionFault as fault:
        return ExtractionOutcome(fault=fault)
    except Exception as exc:  # noqa: BLE001
        return ExtractionOutcome(
            fault=ExtractionFault(ExtractionFault.UNEXPECTED_SHAPE, str(exc))
        )
    return ExtractionOutcome()


def extract_author_from_jsonld(
    document: Any,
    locator: Locator = find_jsonld,
    config: Optional[ExtractionConfig] = None,
) -> Optional[str]:
    """Return the author declared in the page's JSON-LD, or ``None``.

    Never raises: malformed payloads and locator failures read as "no author".
    """
    return resolve_jsonld_author(document, locator, config).author


def author_jsonld_rules(config: Optional[ExtractionConfig] = None) -> RuleBundle:
    """Rule bundle registering the JSON-LD author rule under ``author``."""

    def _rule(context: PageContext) -> Optional[str]:
        return extract_author_from_jsonld(context.soup, config=config)

    return {"author": [_rule]}
