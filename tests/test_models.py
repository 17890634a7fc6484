from __future__ import annotations

import pytest

from pokelib.errors import RemoteError
from pokelib.models import NamedResource, Pokemon, Species, StatValue


def test_species_from_json_keeps_known_fields() -> None:
    payload = {
        "id": 25,
        "name": "pikachu",
        "generation": {"name": "generation-i", "url": "https://pokeapi.co/api/v2/generation/1/"},
        "is_legendary": False,
        "is_mythical": False,
        "varieties": [
            {"is_default": True, "pokemon": {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon/25/"}},
        ],
        "flavor_text_entries": [],
    }

    species = Species.from_json(payload)

    assert species.id == 25
    assert species.name == "pikachu"
    assert species.generation == "generation-i"
    assert species.varieties == (NamedResource("pikachu", "https://pokeapi.co/api/v2/pokemon/25/"),)


def test_pokemon_from_json_reads_sprite_and_stats_in_order() -> None:
    payload = {
        "id": 10094,
        "name": "pikachu-gmax",
        "sprites": {"front_default": None},
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "x"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "x"}},
        ],
    }

    pokemon = Pokemon.from_json(payload)

    assert pokemon.sprite_url is None
    assert pokemon.stats == (StatValue("hp", 35), StatValue("attack", 55))


def test_missing_required_key_is_a_remote_error() -> None:
    with pytest.raises(RemoteError) as excinfo:
        Pokemon.from_json({"id": 1, "name": "bulbasaur"})
    assert "stats" in str(excinfo.value)

    with pytest.raises(RemoteError):
        NamedResource.from_json({"name": "bulbasaur"})


def test_wrongly_typed_fields_are_remote_errors() -> None:
    with pytest.raises(RemoteError, match="Malformed pokemon payload"):
        Pokemon.from_json({"id": 1, "name": "bulbasaur", "stats": None})

    with pytest.raises(RemoteError, match="Malformed pokemon payload"):
        Pokemon.from_json({
            "id": 1,
            "name": "bulbasaur",
            "stats": [{"base_stat": "n/a", "stat": {"name": "hp"}}],
        })

    with pytest.raises(RemoteError, match="Malformed species payload"):
        Species.from_json({"id": None, "name": "bulbasaur"})
