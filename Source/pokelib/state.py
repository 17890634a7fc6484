"""Shared application state read by the GUI and written by background loads.

Each piece of state lives in its own `Slot` with its own lock, so a loader
writing the selection never blocks a redraw reading the catalog. Locks are held
only while a reference is swapped or copied out, never across network I/O.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, Tuple, TypeVar

from .models import NamedResource, SelectedSpecies


T = TypeVar("T")


class Slot(Generic[T]):
    """One independently locked value with a generation counter."""

    def __init__(self, initial: T):
        self._value = initial
        self._generation = 0
        self._lock = threading.Lock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._lock:
            self._value = value

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def next_generation(self) -> int:
        """Reserve and return a new generation number for a pending write."""
        with self._lock:
            self._generation += 1
            return self._generation

    def set_if_current(self, generation: int, value: T) -> bool:
        """Write `value` only if `generation` is still the latest reserved one."""
        with self._lock:
            if generation != self._generation:
                return False
            self._value = value
            return True


@dataclass(frozen=True)
class StateSnapshot:
    loading: bool
    catalog: Optional[Tuple[NamedResource, ...]]
    selection: Optional[SelectedSpecies]
    failure: Optional[str]


class AppState:
    """Loading flag, species catalog, selected species and last failure.

    The slots are independent: nothing here updates two of them atomically.
    """

    def __init__(self):
        self.loading: Slot[bool] = Slot(False)
        self.catalog: Slot[Optional[Tuple[NamedResource, ...]]] = Slot(None)
        self.selection: Slot[Optional[SelectedSpecies]] = Slot(None)
        self.failure: Slot[Optional[str]] = Slot(None)

    def set_loading(self, value: bool) -> None:
        self.loading.set(bool(value))

    def read_loading(self) -> bool:
        return self.loading.get()

    def replace_catalog(self, entries: Optional[Sequence[NamedResource]]) -> None:
        # Stored as a tuple so readers can iterate without holding the lock
        self.catalog.set(tuple(entries) if entries is not None else None)

    def read_catalog(self) -> Optional[Tuple[NamedResource, ...]]:
        return self.catalog.get()

    def replace_selection(self, bundle: Optional[SelectedSpecies]) -> None:
        self.selection.set(bundle)

    def read_selection(self) -> Optional[SelectedSpecies]:
        return self.selection.get()

    def set_failure(self, message: Optional[str]) -> None:
        self.failure.set(message)

    def read_failure(self) -> Optional[str]:
        return self.failure.get()

    def snapshot(self) -> StateSnapshot:
        """Read every slot once for a single redraw."""
        return StateSnapshot(
            loading=self.read_loading(),
            catalog=self.read_catalog(),
            selection=self.read_selection(),
            failure=self.read_failure(),
        )
