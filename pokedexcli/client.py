"""HTTP client for the PokeAPI with a response cache."""

from __future__ import annotations

import json
from typing import Any
from urllib.request import Request, urlopen

from .cache import Cache
from .models import Location, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"


class Client:
    """Fetches locations and pokemon, caching raw responses by URL.

    ``timeout`` and ``cache_interval`` are in seconds.
    """

    base_url = BASE_URL

    def __init__(self, timeout: float, cache_interval: float) -> None:
        self.timeout = timeout
        self._cache = Cache(cache_interval)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page if ``page_url`` is None."""
        url = page_url if page_url is not None else f"{self.base_url}/location-area"
        return LocationPage.from_dict(self._get_json(url))

    def get_location(self, location_name: str) -> Location:
        """Return the location area called ``location_name``."""
        return Location.from_dict(self._get_json(f"{self.base_url}/location-area/{location_name}"))

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the pokemon called ``pokemon_name``."""
        return Pokemon.from_dict(self._get_json(f"{self.base_url}/pokemon/{pokemon_name}"))

    def close(self) -> None:
        """Release the cache's background reaper."""
        self._cache.close()

    def _get_json(self, url: str) -> Any:
        cached = self._cache.get(url)
        if cached is not None:
            return json.loads(cached)

        request = Request(url, method="GET")
        with urlopen(request, timeout=self.timeout) as response:
            body = response.read()

        data = json.loads(body)
        self._cache.add(url, body)
        return data

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()