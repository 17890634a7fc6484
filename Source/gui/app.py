"""Main window: species list on the left, selected species on the right.

The window never talks to PokeAPI itself. Every `POLL_MS` it takes a snapshot
of `AppState` and redraws whatever changed; clicks and the Refresh button only
call the orchestrator triggers.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional, Tuple

from pokelib import AppState, FetchOrchestrator, NamedResource, PokeApiClient, SelectedSpecies
from pokelib.config import APP_NAME, POLL_MS
from pokelib.text import capitalize, matches_search

from gui.sections.species_list import build as build_species_list
from gui.sections.details import build as build_details


logger = logging.getLogger(__name__)


class PokeLibGUI(ttk.Frame):
    title_text = APP_NAME

    def __init__(self, master: tk.Misc, orchestrator: FetchOrchestrator, poll_ms: int = POLL_MS):
        super().__init__(master)
        root = self.winfo_toplevel()
        root.title(APP_NAME)
        root.geometry("800x600")
        root.minsize(600, 400)

        self.orchestrator = orchestrator
        self.app_state: AppState = orchestrator.state
        self.poll_ms = poll_ms

        # What is currently drawn, compared by identity against each snapshot
        self._drawn_catalog: Optional[Tuple[NamedResource, ...]] = None
        self._drawn_term: Optional[str] = None
        self._drawn_selection: Optional[SelectedSpecies] = None
        self._visible: List[NamedResource] = []

        self.pack(fill=tk.BOTH, expand=True)
        self._species = build_species_list(self, self)
        self._details = build_details(self, self)

        self.orchestrator.trigger_load_catalog()
        self.after(0, self._tick)

    # --- Input ---
    def _on_refresh(self) -> None:
        self.orchestrator.trigger_load_catalog()

    def _on_species_select(self, _event=None) -> None:
        sel = self._species["listbox"].curselection()
        if not sel:
            return
        idx = sel[0]
        if 0 <= idx < len(self._visible):
            self.orchestrator.trigger_load_selection(self._visible[idx])

    # --- Redraw loop ---
    def _tick(self) -> None:
        try:
            self._redraw()
        except tk.TclError:
            logger.exception("Redraw failed")
        self.after(self.poll_ms, self._tick)

    def _redraw(self) -> None:
        snap = self.app_state.snapshot()
        term = self._species["search_var"].get()

        if snap.catalog is not self._drawn_catalog or term != self._drawn_term:
            self._draw_catalog(snap.catalog, term)
        if snap.selection is not self._drawn_selection:
            self._draw_selection(snap.selection)

        if snap.failure:
            status = snap.failure
        elif snap.loading:
            status = "Loading..."
        else:
            status = f"{len(self._visible)} species" if snap.catalog is not None else ""
        self._species["status_var"].set(status)

        if snap.selection is None:
            self._details["heading_var"].set("Loading..." if snap.loading else "")

    def _draw_catalog(self, catalog: Optional[Tuple[NamedResource, ...]], term: str) -> None:
        listbox = self._species["listbox"]
        listbox.delete(0, tk.END)
        self._visible = [e for e in catalog or () if matches_search(e.name, term)]
        for entry in self._visible:
            listbox.insert(tk.END, capitalize(entry.name))
        self._drawn_catalog = catalog
        self._drawn_term = term

    def _draw_selection(self, bundle: Optional[SelectedSpecies]) -> None:
        tree = self._details["tree"]
        tree.delete(*tree.get_children())
        self._drawn_selection = bundle
        if bundle is None:
            return
        self._details["heading_var"].set(capitalize(bundle.species.name))
        for pokemon in bundle.pokemon:
            sprite = pokemon.sprite_url or "missing sprite"
            tags = ("pokemon",) if pokemon.sprite_url else ("pokemon", "missing")
            parent = tree.insert("", tk.END, text=capitalize(pokemon.name), values=(sprite,), open=True, tags=tags)
            for stat in pokemon.stats:
                tree.insert(parent, tk.END, text=capitalize(stat.name), values=(stat.base_stat,))


def run() -> int:
    """Create the Tk root, the shared state and the loaders, then block in mainloop."""
    root = tk.Tk()
    orchestrator = FetchOrchestrator(PokeApiClient(), AppState())

    def _close():
        # Loads in flight are not cancelled; just stop waiting for them
        orchestrator.shutdown(wait=False)
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", _close)
    PokeLibGUI(root, orchestrator)
    root.mainloop()
    return 0
