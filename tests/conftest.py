from __future__ import annotations

import threading
import time
from typing import Dict, List, Optional, Sequence

import pytest

from pokelib.errors import RemoteError
from pokelib.models import NamedResource, Pokemon, Species, StatValue
from pokelib.orchestrator import FetchOrchestrator
from pokelib.state import AppState


BASE = "https://pokeapi.test/api/v2"


def species_ref(name: str) -> NamedResource:
    return NamedResource(name=name, url=f"{BASE}/pokemon-species/{name}/")


def pokemon_ref(name: str) -> NamedResource:
    return NamedResource(name=name, url=f"{BASE}/pokemon/{name}/")


def make_pokemon(name: str, hp: int = 35) -> Pokemon:
    return Pokemon(
        id=abs(hash(name)) % 10_000,
        name=name,
        sprite_url=f"https://sprites.test/{name}.png",
        stats=(StatValue("hp", hp), StatValue("speed", 90)),
    )


class FakeClient:
    """In-memory stand-in for PokeApiClient.

    `gates` maps a resource name (or "catalog" / "children") to an Event the
    call waits on, so tests can hold a load mid-flight. `failures` maps the
    same keys to an exception to raise instead.
    """

    def __init__(self, species: Sequence[str], pokemon: Sequence[str]):
        self.species_names = list(species)
        self.pokemon_names = list(pokemon)
        self.gates: Dict[str, threading.Event] = {}
        self.failures: Dict[str, Exception] = {}
        self.delays: Dict[str, float] = {}
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def _enter(self, key: str) -> None:
        with self._lock:
            self.calls.append(key)
        gate = self.gates.get(key)
        if gate is not None:
            assert gate.wait(timeout=5), f"gate {key} never released"
        if key in self.delays:
            time.sleep(self.delays[key])
        if key in self.failures:
            raise self.failures[key]

    def list_catalog(self) -> List[NamedResource]:
        self._enter("catalog")
        return [species_ref(n) for n in self.species_names]

    def list_all_children(self) -> List[NamedResource]:
        self._enter("children")
        return [pokemon_ref(n) for n in self.pokemon_names]

    def resolve(self, ref: NamedResource):
        self._enter(ref.name)
        if "/pokemon-species/" in ref.url:
            return Species(id=1, name=ref.name)
        if "/pokemon/" in ref.url:
            return make_pokemon(ref.name)
        raise RemoteError(f"Unsupported resource reference: {ref.url}")


def wait_until(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def client() -> FakeClient:
    return FakeClient(
        species=["raichu", "pikachu", "bulbasaur", "pichu"],
        pokemon=["bulbasaur", "pikachu", "pikachu-gmax", "raichu", "raichu-alola", "pichu"],
    )


@pytest.fixture
def orchestrator(client: FakeClient, state: AppState):
    orch = FetchOrchestrator(client, state, max_workers=4, child_workers=4)
    yield orch
    for gate in client.gates.values():
        gate.set()
    orch.shutdown(wait=True)
