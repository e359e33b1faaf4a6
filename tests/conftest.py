"""
Shared pytest fixtures for starhop tests.

Provides:
  - src/ on sys.path so the namespace packages import without installing
  - FakeSession: a requests.Session stand-in serving canned SWAPI pages
  - make_pages(): builds a chain of pages linked through `next`
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

BASE = "https://swapi.test/api/starships/"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, reason: str = "OK", text: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Maps URL -> FakeResponse (or an exception to raise). Records every GET."""

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.calls: List[str] = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        resp = self.routes.get(url)
        if resp is None:
            return FakeResponse(404, reason="Not Found")
        if isinstance(resp, Exception):
            raise resp
        return resp


def ship(name: str, consumables: Any = "1 week", mglt: Any = "10") -> Dict[str, Any]:
    return {"name": name, "consumables": consumables, "MGLT": mglt}


def make_pages(sizes: List[int], base: str = BASE) -> Dict[str, FakeResponse]:
    """Routes for len(sizes) pages; page i holds sizes[i] ships named 'ship-<i>-<j>'."""
    total = sum(sizes)
    urls = [base] + [f"{base}?page={i + 1}" for i in range(1, len(sizes))]
    routes = {}
    for i, n in enumerate(sizes):
        routes[urls[i]] = FakeResponse(200, {
            "count": total,
            "next": urls[i + 1] if i + 1 < len(urls) else None,
            "previous": urls[i - 1] if i > 0 else None,
            "results": [ship(f"ship-{i}-{j}") for j in range(n)],
        })
    return routes

