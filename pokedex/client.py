"""HTTP client for the PokeAPI with response caching."""

from __future__ import annotations

import json
from typing import Any

import requests

from .cache import Cache
from .models import Location, LocationArea, Pokemon

API_BASE = "https://pokeapi.co/api/v2"
DEFAULT_CACHE_INTERVAL = 5 * 60.0


class PokeClient:
    """Fetches PokeAPI resources, serving repeated URLs from a cache."""

    def __init__(
        self,
        cache: Cache | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._owns_cache = cache is None
        self._cache = cache if cache is not None else Cache(DEFAULT_CACHE_INTERVAL)
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    @property
    def cache(self) -> Cache:
        return self._cache

    def fetch_locations(self, url: str) -> Location:
        """Fetch one page of the location-area listing."""
        return Location.from_dict(self._get_json(url))

    def fetch_location_area(self, url: str) -> LocationArea:
        """Fetch a single location area."""
        return LocationArea.from_dict(self._get_json(url))

    def fetch_pokemon(self, url: str) -> Pokemon:
        """Fetch a single Pokemon."""
        return Pokemon.from_dict(self._get_json(url))

    def _get_json(self, url: str) -> dict[str, Any]:
        body = self._cache.get(url)
        if body is not None:
            return _decode(body)
        response = self._session.get(url, timeout=self._timeout)
        data = _decode(response.content)
        self._cache.add(url, response.content)
        return data

    def __enter__(self) -> PokeClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._owns_cache:
            self._cache.close()
        self._session.close()


def _decode(body: bytes) -> dict[str, Any]:
    data = json.loads(body)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data