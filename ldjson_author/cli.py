"""Command-line entry point for JSON-LD author extraction."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple

from .config import ExtractionConfig
from .content import default_pipeline, extract_metadata
from .models import PageMetadata

logger = logging.getLogger("ldjson_author.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract author names from JSON-LD structured data in HTML pages.",
    )
    parser.add_argument(
        "sources",
        nargs="+",
        help="HTML files to read, or URLs when --render is given",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Treat sources as URLs and render them with Playwright",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every resolved metadata field as JSON lines",
    )
    parser.add_argument(
        "--wait",
        type=float,
        default=1.0,
        help="Seconds to wait after network idle before reading HTML",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Navigation timeout in seconds",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def load_files(paths: List[str]) -> List[Tuple[str, str]]:
    """Read local HTML files, returning ``(source_url, html)`` pairs."""
    pages: List[Tuple[str, str]] = []
    for raw in paths:
        path = Path(raw)
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.error("Skipping %s: %s", path, exc)
            continue
        pages.append((path.resolve().as_uri(), html))
    return pages


def load_rendered(urls: List[str], config: ExtractionConfig) -> List[Tuple[str, str]]:
    from .render import render_pages

    rendered = asyncio.run(render_pages(urls, config))
    return [(page.final_url, page.html) for page in rendered]


def format_result(metadata: PageMetadata, show_all: bool) -> str:
    if show_all:
        return json.dumps(asdict(metadata), ensure_ascii=False)
    return f"{metadata.source_url}\t{metadata.author or '-'}"


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    config = ExtractionConfig(
        wait_after_load=args.wait,
        navigation_timeout=args.timeout,
    )

    if args.render:
        pages = load_rendered(args.sources, config)
    else:
        pages = load_files(args.sources)

    pipeline = default_pipeline(config)
    found = 0
    for source_url, html in pages:
        metadata = extract_metadata(html, source_url, pipeline)
        if metadata.author:
            found += 1
        print(format_result(metadata, args.all))

    logger.debug("Resolved authors for %d/%d sources", found, len(args.sources))
    return 0 if pages else 1


if __name__ == "__main__":
    sys.exit(main())
