"""HTTP client for the Pokemon API, with responses cached in memory."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from .cache import Cache
from .models import Location, LocationsPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

_T = TypeVar("_T")


def _decode(body: bytes, url: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ValueError(f"invalid JSON in response from {url}") from exc


class Client:
    """Fetches location and Pokemon data, caching raw response bodies.

    ``timeout`` and ``cache_interval`` are in seconds.
    """

    def __init__(self, timeout: float, cache_interval: float) -> None:
        self._timeout = timeout
        self._cache = Cache(cache_interval)
        self._session = requests.Session()

    def list_locations(self, page_url: str | None = None) -> LocationsPage:
        """Return a page of location areas, the first one if no URL is given."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._fetch(url, LocationsPage.from_dict)

    def get_location(self, location_name: str) -> Location:
        """Return the location area with the given name."""
        return self._fetch(f"{BASE_URL}/location-area/{location_name}", Location.from_dict)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokemon with the given name."""
        return self._fetch(f"{BASE_URL}/pokemon/{pokemon_name}", Pokemon.from_dict)

    def close(self) -> None:
        """Release the HTTP session and stop the cache reaper."""
        self._session.close()
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, url: str, parse: Callable[[Any], _T]) -> _T:
        cached = self._cache.get(url)
        if cached is not None:
            return parse(_decode(cached, url))

        response = self._session.get(url, timeout=self._timeout)
        body = response.content
        result = parse(_decode(body, url))
        self._cache.add(url, body)
        return result