"""Chain-of-responsibility metadata pipeline.

Each field owns an ordered list of rules. Rules run in registration order and
the first one returning a non-empty string resolves the field; later rules act
as fallbacks only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

from .utils import clean_text

logger = logging.getLogger("ldjson_author.pipeline")


@dataclass
class PageContext:
    """Parsed page handed to every rule."""

    html: str
    url: Optional[str] = None
    soup: BeautifulSoup = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.soup = BeautifulSoup(self.html, "html.parser")


Rule = Callable[[PageContext], Optional[str]]
RuleBundle = Dict[str, List[Rule]]


class MetadataPipeline:
    """Run rule bundles field by field, falling back rule to rule."""

    def __init__(self, bundles: Iterable[RuleBundle]) -> None:
        self._rules: Dict[str, List[Rule]] = {}
        for bundle in bundles:
            self.register(bundle)

    def register(self, bundle: RuleBundle) -> None:
        """Append a bundle's rules after the ones already registered."""
        for field_name, rules in bundle.items():
            self._rules.setdefault(field_name, []).extend(rules)

    @property
    def fields(self) -> List[str]:
        return list(self._rules)

    def resolve_field(self, field_name: str, context: PageContext) -> Optional[str]:
        for index, rule in enumerate(self._rules.get(field_name, [])):
            try:
                value = clean_text(rule(context))
            except Exception as exc:  # noqa: BLE001
                logger.debug(
                    "Rule %d for %s failed on %s: %s",
                    index,
                    field_name,
                    context.url or "<document>",
                    exc,
                )
                continue
            if value:
                logger.debug(
                    "Resolved %s via rule %d (%s)",
                    field_name,
                    index,
                    getattr(rule, "__qualname__", repr(rule)),
                )
                return value
        return None

    def run(self, html: str, url: Optional[str] = None) -> Dict[str, Optional[str]]:
        """Resolve every registered field for a single page."""
        context = PageContext(html=html, url=url)
        return {name: self.resolve_field(name, context) for name in self._rules}
