"""Data records for the PokeAPI resources the Pokedex uses."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL that describes it."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NamedResource:
        return cls(name=data.get("name") or "", url=data.get("url") or "")


@dataclass(frozen=True)
class Location:
    """One page of the location-area listing."""

    count: int = 0
    next: str = ""
    previous: str = ""
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Location:
        return cls(
            count=int(data.get("count") or 0),
            next=data.get("next") or "",
            previous=data.get("previous") or "",
            results=[NamedResource.from_dict(item) for item in data.get("results") or []],
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocationArea:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            location=NamedResource.from_dict(data.get("location") or {}),
            pokemon_encounters=[
                NamedResource.from_dict(encounter.get("pokemon") or {})
                for encounter in data.get("pokemon_encounters") or []
            ],
        )


@dataclass(frozen=True)
class Stat:
    """A base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Stat:
        return cls(
            base_stat=int(data.get("base_stat") or 0),
            effort=int(data.get("effort") or 0),
            stat=NamedResource.from_dict(data.get("stat") or {}),
        )


@dataclass(frozen=True)
class PokemonType:
    """A type slot of a Pokemon."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PokemonType:
        return cls(
            slot=int(data.get("slot") or 0),
            type=NamedResource.from_dict(data.get("type") or {}),
        )


@dataclass(frozen=True)
class Pokemon:
    """A Pokemon with the details shown by the Pokedex."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[Stat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pokemon:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            base_experience=int(data.get("base_experience") or 0),
            height=int(data.get("height") or 0),
            weight=int(data.get("weight") or 0),
            stats=[Stat.from_dict(item) for item in data.get("stats") or []],
            types=[PokemonType.from_dict(item) for item in data.get("types") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the record in the API's JSON layout."""
        return asdict(self)