"""Locate and parse JSON-LD script blocks in an HTML document."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup

from .config import MAX_NESTING_DEPTH

JsonLdPayload = Union[Dict[str, Any], List[Dict[str, Any]]]

_JSONLD_TYPE = re.compile(r"^\s*application/ld\+json\s*$", re.IGNORECASE)


def _as_soup(document: Union[BeautifulSoup, str]) -> BeautifulSoup:
    if isinstance(document, BeautifulSoup):
        return document
    return BeautifulSoup(document, "html.parser")


def _flatten(payload: Any, depth: int = 0) -> List[Dict[str, Any]]:
    """Flatten nested arrays and ``@graph`` containers into plain nodes.

    A container's own properties form a node placed before its graph items.
    """
    if depth > MAX_NESTING_DEPTH:
        return []
    if isinstance(payload, list):
        nodes: List[Dict[str, Any]] = []
        for item in payload:
            nodes.extend(_flatten(item, depth + 1))
        return nodes
    if isinstance(payload, dict):
        graph = payload.get("@graph")
        if not isinstance(graph, list):
            return [payload]
        nodes = []
        rest = {key: value for key, value in payload.items() if key not in ("@graph", "@context")}
        if rest:
            nodes.append(rest)
        nodes.extend(_flatten(graph, depth + 1))
        return nodes
    return []


def iter_jsonld_blocks(document: Union[BeautifulSoup, str]) -> List[Any]:
    """Return the decoded payload of every parsable ld+json script tag."""
    soup = _as_soup(document)
    blocks: List[Any] = []
    for tag in soup.find_all("script", attrs={"type": _JSONLD_TYPE}):
        raw = (tag.string or tag.get_text() or "").strip()
        if not raw:
            continue
        try:
            blocks.append(json.loads(raw))
        except (ValueError, RecursionError):
            continue
    return blocks


def find_jsonld(document: Union[BeautifulSoup, str]) -> Optional[JsonLdPayload]:
    """Return the page's JSON-LD nodes.

    ``None`` when the page has none, the node itself when there is exactly
    one, otherwise a list in document order.
    """
    nodes: List[Dict[str, Any]] = []
    for block in iter_jsonld_blocks(document):
        nodes.extend(_flatten(block))
    if not nodes:
        return None
    if len(nodes) == 1:
        return nodes[0]
    return nodes
