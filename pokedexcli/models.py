"""Data types for the PokeAPI location and pokemon resources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    return int(data.get(key) or 0)


def _str(data: Mapping[str, Any], key: str) -> str:
    return str(data.get(key) or "")


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    return list(data.get(key) or [])


def _resource(data: Any) -> NamedResource:
    return NamedResource.from_dict(data) if data is not None else NamedResource()


@dataclass(frozen=True)
class NamedResource:
    """A name and the URL of the resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _require_mapping(data)
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _require_mapping(data)
        return cls(
            count=_int(data, "count"),
            next=data.get("next"),
            previous=data.get("previous"),
            results=[NamedResource.from_dict(r) for r in _list(data, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A pokemon that may be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)
    versions: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        data = _require_mapping(data)
        return cls(
            pokemon=_resource(data.get("pokemon")),
            versions=[
                _resource(_require_mapping(detail).get("version"))
                for detail in _list(data, "version_details")
            ],
        )


@dataclass(frozen=True)
class Location:
    """A location area with the pokemon that can be encountered in it."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: dict[str, str] = field(default_factory=dict)
    encounter_methods: list[NamedResource] = field(default_factory=list)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        data = _require_mapping(data)
        names = {}
        for entry in _list(data, "names"):
            entry = _require_mapping(entry)
            names[_resource(entry.get("language")).name] = _str(entry, "name")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=_resource(data.get("location")),
            names=names,
            encounter_methods=[
                _resource(_require_mapping(rate).get("encounter_method"))
                for rate in _list(data, "encounter_method_rates")
            ],
            pokemon_encounters=[
                PokemonEncounter.from_dict(enc) for enc in _list(data, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a pokemon and the effort value it yields."""

    stat: NamedResource = field(default_factory=NamedResource)
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _require_mapping(data)
        return cls(
            stat=_resource(data.get("stat")),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of a pokemon's types, in its slot."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _require_mapping(data)
        return cls(slot=_int(data, "slot"), type=_resource(data.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """A pokemon species form as described by the API."""

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
    moves: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _require_mapping(data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=bool(data.get("is_default")),
            location_area_encounters=_str(data, "location_area_encounters"),
            species=_resource(data.get("species")),
            abilities=[
                _resource(_require_mapping(a).get("ability")) for a in _list(data, "abilities")
            ],
            forms=[NamedResource.from_dict(f) for f in _list(data, "forms")],
            moves=[_resource(_require_mapping(m).get("move")) for m in _list(data, "moves")],
            stats=[PokemonStat.from_dict(s) for s in _list(data, "stats")],
            types=[PokemonType.from_dict(t) for t in _list(data, "types")],
        )