"""Typed views of the location and Pokemon documents served by the API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

_T = TypeVar("_T")


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


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _opt_str(data, key)
    return value if value is not None else ""


def _items(
    data: Mapping[str, Any], key: str, parse: Callable[[Any], _T]
) -> tuple[_T, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list, got {type(value).__name__}")
    return tuple(parse(item) for item in value)


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        m = _mapping(data, "named resource")
        return cls(name=_str(m, "name"), url=_str(m, "url"))


@dataclass(frozen=True)
class LocationsPage:
    """One page of location areas, with links to its neighbours."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationsPage:
        m = _mapping(data, "locations page")
        return cls(
            count=_int(m, "count"),
            next=_opt_str(m, "next"),
            previous=_opt_str(m, "previous"),
            results=_items(m, "results", NamedResource.from_dict),
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokemon that can be met in a location area."""

    pokemon: NamedResource = NamedResource()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        m = _mapping(data, "pokemon encounter")
        return cls(pokemon=NamedResource.from_dict(m.get("pokemon")))


@dataclass(frozen=True)
class Location:
    """A location area and the Pokemon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = NamedResource()
    pokemon_encounters: tuple[PokemonEncounter, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        m = _mapping(data, "location")
        return cls(
            id=_int(m, "id"),
            name=_str(m, "name"),
            game_index=_int(m, "game_index"),
            location=NamedResource.from_dict(m.get("location")),
            pokemon_encounters=_items(
                m, "pokemon_encounters", PokemonEncounter.from_dict
            ),
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = NamedResource()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        m = _mapping(data, "pokemon stat")
        return cls(
            base_stat=_int(m, "base_stat"),
            effort=_int(m, "effort"),
            stat=NamedResource.from_dict(m.get("stat")),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of a Pokemon's types, in its slot."""

    slot: int = 0
    type: NamedResource = NamedResource()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        m = _mapping(data, "pokemon type")
        return cls(slot=_int(m, "slot"), type=NamedResource.from_dict(m.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon with its physical data, stats and types."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = NamedResource()
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonType, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        m = _mapping(data, "pokemon")
        return cls(
            id=_int(m, "id"),
            name=_str(m, "name"),
            base_experience=_int(m, "base_experience"),
            height=_int(m, "height"),
            weight=_int(m, "weight"),
            order=_int(m, "order"),
            is_default=_bool(m, "is_default"),
            species=NamedResource.from_dict(m.get("species")),
            stats=_items(m, "stats", PokemonStat.from_dict),
            types=_items(m, "types", PokemonType.from_dict),
        )