"""Typed views of the JSON documents returned by the Pokémon API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for {what}, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _mapping(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class LocationAreasResponse:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationAreasResponse:
        obj = _mapping(data, "location areas")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(obj, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)
    version_details: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        obj = _mapping(data, "pokemon encounter")
        return cls(
            pokemon=NamedResource.from_dict(obj.get("pokemon")),
            version_details=list(_list(obj, "version_details")),
        )


@dataclass(frozen=True)
class ExploreAreaResponse:
    """Details of a single location area."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: list[Any] = field(default_factory=list)
    encounter_method_rates: list[Any] = field(default_factory=list)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ExploreAreaResponse:
        obj = _mapping(data, "location area")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=NamedResource.from_dict(obj.get("location")),
            names=list(_list(obj, "names")),
            encounter_method_rates=list(_list(obj, "encounter_method_rates")),
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in _list(obj, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokémon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        obj = _mapping(data, "stat")
        return cls(
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
            stat=NamedResource.from_dict(obj.get("stat")),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of a Pokémon's types, with its slot."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        obj = _mapping(data, "type")
        return cls(slot=_int(obj, "slot"), type=NamedResource.from_dict(obj.get("type")))


@dataclass(frozen=True)
class PokemonResponse:
    """Details of a single Pokémon."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[NamedResource] = field(default_factory=list)
    forms: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonResponse:
        obj = _mapping(data, "pokemon")
        abilities = [
            NamedResource.from_dict(_mapping(a, "ability").get("ability"))
            for a in _list(obj, "abilities")
        ]
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            order=_int(obj, "order"),
            is_default=_bool(obj, "is_default"),
            location_area_encounters=_str(obj, "location_area_encounters"),
            species=NamedResource.from_dict(obj.get("species")),
            abilities=abilities,
            forms=[NamedResource.from_dict(f) for f in _list(obj, "forms")],
            stats=[PokemonStat.from_dict(s) for s in _list(obj, "stats")],
            types=[PokemonType.from_dict(t) for t in _list(obj, "types")],
        )