from __future__ import annotations

from pokelib.models import SelectedSpecies, Species
from pokelib.state import AppState, Slot

from conftest import make_pokemon, species_ref


def test_slot_generation_guards_stale_writes() -> None:
    slot: Slot[str] = Slot("initial")
    old = slot.next_generation()
    new = slot.next_generation()

    assert slot.set_if_current(old, "stale") is False
    assert slot.get() == "initial"
    assert slot.set_if_current(new, "fresh") is True
    assert slot.get() == "fresh"
    assert slot.generation == new


def test_catalog_is_copied_on_write() -> None:
    state = AppState()
    entries = [species_ref("pikachu")]

    state.replace_catalog(entries)
    entries.append(species_ref("raichu"))

    assert state.read_catalog() == (species_ref("pikachu"),)


def test_initial_state_and_snapshot() -> None:
    state = AppState()
    snap = state.snapshot()
    assert snap.loading is False
    assert snap.catalog is None
    assert snap.selection is None
    assert snap.failure is None

    bundle = SelectedSpecies(Species(id=25, name="pikachu"), (make_pokemon("pikachu"),))
    state.set_loading(True)
    state.replace_selection(bundle)
    state.set_failure("offline")
    snap = state.snapshot()
    assert snap.loading is True
    assert snap.selection is bundle
    assert snap.failure == "offline"

    state.replace_catalog(None)
    assert state.read_catalog() is None
