"""HTTP client for the Pokémon API, backed by an optional response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from datetime import timedelta
from typing import Any, Protocol, TypeVar

from pokedexcli.cache import Cache
from pokedexcli.models import (
    ExploreAreaResponse,
    LocationAreasResponse,
    PokemonResponse,
)

BASE_URL = "https://pokeapi.co/api/v2"


class ApiError(Exception):
    """Raised when the API cannot be reached or returns an unusable answer."""


class _FromDict(Protocol):
    @classmethod
    def from_dict(cls, data: Any) -> Any: ...


_M = TypeVar("_M", bound=_FromDict)


class Client:
    """Fetches location areas and Pokémon, caching raw response bodies by URL."""

    def __init__(self, timeout: float | timedelta = 5.0, cache: Cache | None = None) -> None:
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self.timeout = float(timeout)
        self.cache = cache
        self.base_url = BASE_URL

    def list_locations(self, page_url: str | None = None) -> LocationAreasResponse:
        """Return one page of location areas; the first page when ``page_url`` is None."""
        url = page_url if page_url is not None else self.base_url + "/location-area"
        return self._load(url, LocationAreasResponse)

    def explore_location(self, area_name: str) -> ExploreAreaResponse:
        """Return the details of the named location area."""
        return self._load(self.base_url + "/location-area/" + area_name, ExploreAreaResponse)

    def get_pokemon(self, name: str) -> PokemonResponse:
        """Return the details of the named Pokémon."""
        return self._load(self.base_url + "/pokemon/" + name, PokemonResponse)

    def _load(self, url: str, model: type[_M]) -> _M:
        body = self._fetch(url)
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise ApiError(f"invalid JSON from {url}: {exc}") from exc
        try:
            return model.from_dict(data)
        except ValueError as exc:
            raise ApiError(f"unexpected response from {url}: {exc}") from exc

    def _fetch(self, url: str) -> bytes:
        if self.cache is not None:
            cached = self.cache.get(url)
            if cached is not None:
                return cached
        request = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise ApiError(f"GET {url}: HTTP {exc.code} {exc.reason}") from exc
        except (OSError, ValueError) as exc:
            raise ApiError(f"GET {url}: {exc}") from exc
        if self.cache is not None:
            self.cache.add(url, body)
        return body