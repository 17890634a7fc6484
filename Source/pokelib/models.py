"""Fixed-shape records for the PokeAPI payloads the app consumes.

Only the fields the app renders or the loaders rely on are kept; everything
else in the JSON is dropped at parse time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .errors import RemoteError


def _require(payload: Dict[str, Any], key: str, kind: str) -> Any:
    try:
        return payload[key]
    except (KeyError, TypeError):
        raise RemoteError(f"Malformed {kind} payload: missing '{key}'")


@dataclass(frozen=True)
class NamedResource:
    """A `{name, url}` pair from a PokeAPI listing.

    Used both for catalog entries (species) and child candidates (pokemon).
    """

    name: str
    url: str

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "NamedResource":
        return cls(
            name=str(_require(payload, "name", "resource")),
            url=str(_require(payload, "url", "resource")),
        )


@dataclass(frozen=True)
class Species:
    id: int
    name: str
    generation: Optional[str] = None
    is_legendary: bool = False
    is_mythical: bool = False
    varieties: Tuple[NamedResource, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Species":
        try:
            return cls._parse(payload)
        except (TypeError, ValueError, AttributeError) as e:
            raise RemoteError(f"Malformed species payload: {e}") from e

    @classmethod
    def _parse(cls, payload: Dict[str, Any]) -> "Species":
        generation = payload.get("generation") or {}
        varieties = tuple(
            NamedResource.from_json(v["pokemon"])
            for v in payload.get("varieties") or []
            if isinstance(v, dict) and isinstance(v.get("pokemon"), dict)
        )
        return cls(
            id=int(_require(payload, "id", "species")),
            name=str(_require(payload, "name", "species")),
            generation=generation.get("name") if isinstance(generation, dict) else None,
            is_legendary=bool(payload.get("is_legendary", False)),
            is_mythical=bool(payload.get("is_mythical", False)),
            varieties=varieties,
        )


@dataclass(frozen=True)
class StatValue:
    name: str
    base_stat: int


@dataclass(frozen=True)
class Pokemon:
    id: int
    name: str
    sprite_url: Optional[str] = None
    stats: Tuple[StatValue, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Pokemon":
        try:
            return cls._parse(payload)
        except (TypeError, ValueError, AttributeError) as e:
            raise RemoteError(f"Malformed pokemon payload: {e}") from e

    @classmethod
    def _parse(cls, payload: Dict[str, Any]) -> "Pokemon":
        sprites = payload.get("sprites") or {}
        stats = []
        for entry in _require(payload, "stats", "pokemon"):
            stat = _require(entry, "stat", "stat")
            stats.append(StatValue(name=str(_require(stat, "name", "stat")), base_stat=int(_require(entry, "base_stat", "stat"))))
        return cls(
            id=int(_require(payload, "id", "pokemon")),
            name=str(_require(payload, "name", "pokemon")),
            sprite_url=sprites.get("front_default") if isinstance(sprites, dict) else None,
            stats=tuple(stats),
        )


@dataclass(frozen=True)
class SelectedSpecies:
    """A species together with the pokemon resolved for it in the same load."""

    species: Species
    pokemon: Tuple[Pokemon, ...] = field(default_factory=tuple)
