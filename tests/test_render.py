from __future__ import annotations

import asyncio

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ldjson_author.config import ExtractionConfig
from ldjson_author.render import JSONLD_SELECTOR, wait_for_jsonld


class _Locator:
    def __init__(self, count: int) -> None:
        self._count = count

    async def count(self) -> int:
        return self._count


class _Page:
    url = "https://example.com/article"

    def __init__(self, blocks: int, times_out: bool = False) -> None:
        self.blocks = blocks
        self.times_out = times_out
        self.waits = []

    async def wait_for_selector(self, selector, state, timeout):
        self.waits.append((selector, state, timeout))
        if self.times_out:
            raise PlaywrightTimeoutError("Timeout exceeded")

    def locator(self, selector):
        assert selector == JSONLD_SELECTOR
        return _Locator(self.blocks)


def test_wait_for_jsonld_counts_attached_scripts() -> None:
    page = _Page(blocks=2)
    count = asyncio.run(wait_for_jsonld(page, ExtractionConfig(wait_after_load=1.5)))

    assert count == 2
    assert page.waits == [(JSONLD_SELECTOR, "attached", 1500.0)]


def test_wait_for_jsonld_tolerates_pages_without_structured_data() -> None:
    page = _Page(blocks=0, times_out=True)
    assert asyncio.run(wait_for_jsonld(page, ExtractionConfig())) == 0


def test_wait_for_jsonld_skips_waiting_when_disabled() -> None:
    page = _Page(blocks=1)
    assert asyncio.run(wait_for_jsonld(page, ExtractionConfig(wait_after_load=0))) == 1
    assert page.waits == []
