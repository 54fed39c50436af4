"""Render live pages with Playwright so script-injected JSON-LD is present."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from playwright.async_api import (
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from .config import ExtractionConfig

logger = logging.getLogger("ldjson_author.render")

JSONLD_SELECTOR = 'script[type="application/ld+json"]'


@dataclass
class RenderedPage:
    """HTML captured after navigation settled."""

    url: str
    final_url: str
    html: str
    jsonld_blocks: int = 0


async def wait_for_jsonld(page: Page, config: ExtractionConfig) -> int:
    """Wait up to ``wait_after_load`` seconds for an ld+json script.

    Tag managers often inject structured data after network idle. Returns
    the number of ld+json scripts present once waiting ends; a page that
    never gets one is not an error.
    """
    if config.wait_after_load:
        try:
            await page.wait_for_selector(
                JSONLD_SELECTOR,
                state="attached",
                timeout=config.wait_after_load * 1000,
            )
        except PlaywrightTimeoutError:
            logger.debug("No JSON-LD appeared on %s", page.url)
    return await page.locator(JSONLD_SELECTOR).count()


async def render_page(
    playwright: Playwright,
    url: str,
    config: ExtractionConfig,
) -> RenderedPage:
    """Load a URL, wait for its structured data, and capture the HTML."""
    browser = await playwright.chromium.launch(headless=True)
    page = await browser.new_page()
    page.set_default_navigation_timeout(config.navigation_timeout * 1000)
    try:
        logger.info("Loading %s", url)
        await page.goto(url, wait_until="networkidle")
        blocks = await wait_for_jsonld(page, config)
        logger.debug("%s carries %d JSON-LD block(s)", page.url, blocks)
        return RenderedPage(
            url=url,
            final_url=page.url,
            html=await page.content(),
            jsonld_blocks=blocks,
        )
    finally:
        await browser.close()


async def render_pages(urls: List[str], config: ExtractionConfig) -> List[RenderedPage]:
    """Render each URL sequentially, skipping the ones that fail to load."""
    pages: List[RenderedPage] = []
    async with async_playwright() as playwright:
        for url in urls:
            try:
                pages.append(await render_page(playwright, url, config))
            except PlaywrightTimeoutError as exc:
                logger.error("Timeout while loading %s: %s", url, exc)
            except Exception:  # noqa: BLE001
                logger.exception("Unexpected error loading %s", url)
    return pages
