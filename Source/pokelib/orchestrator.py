"""Background loaders that fill `AppState` for the GUI.

Two workflows exist: loading the species catalog and loading one selected
species with all of its pokemon. Each trigger resets the relevant slots on the
calling thread, then submits the network work to a thread pool and returns the
`Future` immediately. Workflows communicate only through the state slots.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence

from .api import CatalogClient
from .config import CHILD_WORKERS, DISCARD_STALE, WORKFLOW_WORKERS
from .errors import RemoteError
from .models import NamedResource, Pokemon, SelectedSpecies, Species
from .state import AppState, Slot


logger = logging.getLogger(__name__)


def sort_catalog(entries: Iterable[NamedResource]) -> List[NamedResource]:
    """Stable ascending sort by name."""
    return sorted(entries, key=lambda e: e.name)


def filter_children(species_name: str, candidates: Iterable[NamedResource]) -> List[NamedResource]:
    """Pokemon whose name starts with the species name, in listing order."""
    return [c for c in candidates if c.name.startswith(species_name)]


class FetchOrchestrator:
    """Runs catalog and selection loads in the background.

    Superseded loads are never cancelled. By default whichever load finishes
    last overwrites the slot; with `discard_stale` a load only publishes if no
    newer load of the same slot was triggered after it.
    """

    def __init__(
        self,
        client: CatalogClient,
        state: AppState,
        max_workers: int = WORKFLOW_WORKERS,
        child_workers: int = CHILD_WORKERS,
        discard_stale: bool = DISCARD_STALE,
    ):
        self.client = client
        self.state = state
        self.discard_stale = discard_stale
        self._executor = ThreadPoolExecutor(max_workers=max(1, max_workers), thread_name_prefix="pokelib_fetch")
        # Separate pool so workflow threads never wait on tasks queued behind themselves
        self._child_executor = ThreadPoolExecutor(max_workers=max(1, child_workers), thread_name_prefix="pokelib_child")

    # --- Triggers (called from the GUI thread) ---
    def trigger_load_catalog(self) -> Future:
        generation = self.state.catalog.next_generation()
        self.state.set_loading(True)
        self.state.replace_catalog(None)
        self.state.set_failure(None)
        logger.info("Loading species catalog (generation %d)", generation)
        return self._executor.submit(self._run, "species catalog", self.state.catalog, generation, self._load_catalog)

    def trigger_load_selection(self, entry: NamedResource) -> Future:
        generation = self.state.selection.next_generation()
        self.state.set_loading(True)
        self.state.replace_selection(None)
        self.state.set_failure(None)
        logger.info("Loading species '%s' (generation %d)", entry.name, generation)
        return self._executor.submit(
            self._run,
            f"species '{entry.name}'",
            self.state.selection,
            generation,
            lambda gen: self._load_selection(entry, gen),
        )

    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        """Stop accepting loads. `cancel_futures` drops loads not yet started."""
        self._executor.shutdown(wait=wait, cancel_futures=cancel_futures)
        self._child_executor.shutdown(wait=wait, cancel_futures=cancel_futures)

    def __enter__(self) -> "FetchOrchestrator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)

    # --- Workflows (run on pool threads) ---
    def _load_catalog(self, generation: int) -> None:
        entries = sort_catalog(self.client.list_catalog())
        if self._publish(self.state.catalog, generation, tuple(entries)):
            logger.debug("Catalog generation %d published with %d species", generation, len(entries))
            self.state.set_loading(False)

    def _load_selection(self, entry: NamedResource, generation: int) -> None:
        species = self.client.resolve(entry)
        if not isinstance(species, Species):
            raise RemoteError(f"Expected a species record for {entry.url}", url=entry.url)
        candidates = filter_children(species.name, self.client.list_all_children())
        logger.debug("Species '%s' has %d candidate pokemon", species.name, len(candidates))
        pokemon = tuple(self._child_executor.map(self._resolve_child, candidates))
        bundle = SelectedSpecies(species=species, pokemon=pokemon)
        if self._publish(self.state.selection, generation, bundle):
            self.state.set_loading(False)

    def _resolve_child(self, candidate: NamedResource) -> Pokemon:
        record = self.client.resolve(candidate)
        if not isinstance(record, Pokemon):
            raise RemoteError(f"Expected a pokemon record for {candidate.url}", url=candidate.url)
        return record

    # --- Helpers ---
    def _run(self, label: str, slot: Slot, generation: int, body: Callable[[int], None]) -> None:
        started = time.monotonic()
        try:
            body(generation)
        except RemoteError as e:
            logger.error("Loading %s failed: %s", label, e, exc_info=True)
            self._fail(slot, generation, f"Failed to load {label}: {e}")
            return
        except Exception as e:
            logger.exception("Unexpected error while loading %s", label)
            self._fail(slot, generation, f"Failed to load {label}: {e}")
            raise
        logger.info("Loaded %s in %.2fs", label, time.monotonic() - started)

    def _publish(self, slot: Slot, generation: int, value) -> bool:
        if not self.discard_stale:
            slot.set(value)
            return True
        if slot.set_if_current(generation, value):
            return True
        logger.info("Discarding stale result (generation %d, latest %d)", generation, slot.generation)
        return False

    def _fail(self, slot: Slot, generation: int, message: str) -> None:
        # The data slot stays as cleared by the trigger
        if self.discard_stale and slot.generation != generation:
            return
        self.state.set_failure(message)
        self.state.set_loading(False)


def find_entry(entries: Sequence[NamedResource], name: str) -> Optional[NamedResource]:
    for entry in entries:
        if entry.name == name:
            return entry
    return None
