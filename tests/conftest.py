from __future__ import annotations

import json
from typing import Any

import pytest


def _page(*payloads: Any, head: str = "") -> str:
    scripts = "\n".join(
        f'<script type="application/ld+json">{p if isinstance(p, str) else json.dumps(p)}</script>'
        for p in payloads
    )
    return f"<html><head>{head}{scripts}</head><body><p>Body</p></body></html>"


@pytest.fixture
def make_page():
    """Build an HTML page embedding each payload in its own ld+json script."""
    return _page
