#!/usr/bin/env python3
# src/starhop/providers/swapi.py
"""
SWAPI starship catalog provider.

SWAPI (documented behavior):
- starships:  GET https://swapi.dev/api/starships/
  -> {"count": 36, "next": "https://swapi.dev/api/starships/?page=2", "previous": null, "results": [...]}

Notes:
- Results are paginated (10 per page). `next` is null on the last page.
- Pages are fetched one after another; the URL of page N+1 is only known
  once page N has been parsed.
- No retries here. A failed page fails the whole load; call get_all() again to retry.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Set
import logging
import requests

from .base import ProgressCallback, Starship, StarshipSource

_LOG = logging.getLogger(__name__)
if not _LOG.handlers:
    _h = logging.StreamHandler()
    _h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _LOG.addHandler(_h)
_LOG.setLevel(logging.INFO)


class CatalogFetchError(RuntimeError):
    """A page could not be fetched or decoded. Carries the HTTP status when there was one."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class StarshipPage:
    url: str
    starships: List[Starship]
    count: int                  # total across all pages, as reported by the API
    next: Optional[str] = None


class SwapiProvider(StarshipSource):
    """
    Thin client for the SWAPI starships endpoint.

    get_all(on_progress) follows `next` links until exhausted and returns every
    starship in server order. on_progress(url, loaded_so_far, total) is called
    once per page, after that page's ships are added.
    """
    BASE = "https://swapi.dev/api/starships/"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
    ):
        self.base_url = base_url or self.BASE
        self.timeout = timeout
        self.session = session or requests.Session()
        self.user_agent = user_agent

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    # --------------------------
    # Public
    # --------------------------
    def iter_pages(self, url: Optional[str] = None) -> Iterator[StarshipPage]:
        """Yield pages lazily, starting at `url` (default: base URL)."""
        url = url or self.base_url
        seen: Set[str] = set()
        while url:
            if url in seen:
                raise CatalogFetchError(f"Pagination loop: {url} was already fetched")
            seen.add(url)

            data = self._get_json(url)
            page = self._parse_page(url, data)
            yield page
            url = page.next

    def get_all(
        self,
        on_progress: Optional[ProgressCallback] = None,
        url: Optional[str] = None,
    ) -> List[Starship]:
        starships: List[Starship] = []
        for page in self.iter_pages(url):
            starships.extend(page.starships)
            _LOG.info(f"[SWAPI] data loaded from {page.url}")
            if on_progress:
                on_progress(page.url, tuple(starships), page.count)
        return starships

    # --------------------------
    # Internals
    # --------------------------
    def _get_json(self, url: str) -> Dict[str, Any]:
        _LOG.debug(f"[SWAPI] GET {url}")
        try:
            r = self.session.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise CatalogFetchError(f"Network error: {e}") from e
        if r.status_code >= 400:
            raise CatalogFetchError(f"Server error: {r.status_code} {r.reason}", status_code=r.status_code)
        try:
            data = r.json()
        except ValueError as e:
            raise CatalogFetchError(f"Response from {url} is not JSON: {e}") from e
        if not isinstance(data, dict):
            raise CatalogFetchError(f"Unexpected payload from {url} (not an object).")
        return data

    @staticmethod
    def _parse_page(url: str, data: Dict[str, Any]) -> StarshipPage:
        results = data.get("results")
        if not isinstance(results, list):
            raise CatalogFetchError(f"Unexpected payload from {url}: 'results' is not a list.")
        count = data.get("count")
        if isinstance(count, bool) or not isinstance(count, int):
            raise CatalogFetchError(f"Unexpected payload from {url}: 'count' is not an integer.")
        for item in results:
            if not isinstance(item, dict):
                raise CatalogFetchError(f"Unexpected payload from {url}: result item is not an object.")

        return StarshipPage(
            url=url,
            starships=[Starship.from_api(item) for item in results],
            count=count,
            next=data.get("next") or None,
        )
