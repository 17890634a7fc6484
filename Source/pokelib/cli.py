from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Optional, Sequence

from .api import PokeApiClient
from .config import APP_NAME
from .logging_utils import setup_logging, log_exception_context, crash_hint
from .models import SelectedSpecies
from .orchestrator import FetchOrchestrator, find_entry
from .state import AppState
from .text import capitalize, matches_search


logger = logging.getLogger(__name__)


def _print_selection(bundle: SelectedSpecies) -> None:
    print(capitalize(bundle.species.name))
    print("=" * len(bundle.species.name))
    for pokemon in bundle.pokemon:
        print()
        print(capitalize(pokemon.name))
        print(f"  Sprite: {pokemon.sprite_url or 'missing sprite'}")
        if not pokemon.stats:
            continue
        width = max(len(s.name) for s in pokemon.stats)
        print(f"  {'Stat'.ljust(width)}  Value")
        for stat in pokemon.stats:
            print(f"  {capitalize(stat.name).ljust(width)}  {stat.base_stat}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokelib",
        description=f"{APP_NAME} - browse Pokémon species and their forms (headless)",
    )
    parser.add_argument("--list", action="store_true", help="List species in the catalog")
    parser.add_argument("--search", default="", help="Only list species whose name contains this text")
    parser.add_argument("--show", metavar="NAME", help="Show the forms and base stats of one species")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait for each load")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to the console")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(console_level=logging.INFO if args.verbose else logging.WARNING)
    if not args.list and not args.show:
        args.list = True

    state = AppState()
    orchestrator = FetchOrchestrator(PokeApiClient(), state)
    timed_out = False
    try:
        orchestrator.trigger_load_catalog().result(timeout=args.timeout)
        catalog = state.read_catalog()
        if catalog is None:
            print(f"[ERROR] {state.read_failure() or 'Catalog unavailable'}")
            print(crash_hint())
            return 3

        if args.list:
            for entry in catalog:
                if matches_search(entry.name, args.search):
                    print(capitalize(entry.name))

        if args.show:
            entry = find_entry(catalog, args.show.strip().lower())
            if entry is None:
                print(f"[ERROR] Unknown species: {args.show}")
                return 1
            orchestrator.trigger_load_selection(entry).result(timeout=args.timeout)
            bundle = state.read_selection()
            if bundle is None:
                print(f"[ERROR] {state.read_failure() or 'Species unavailable'}")
                print(crash_hint())
                return 3
            _print_selection(bundle)
    except FutureTimeoutError:
        timed_out = True
        print(f"[ERROR] Timed out waiting for PokeAPI after {args.timeout}s")
        return 3
    except Exception:
        log_exception_context("Unhandled error in CLI", logger)
        print("[ERROR] Unhandled error.")
        print(crash_hint())
        return 3
    finally:
        # After a timeout the load still in flight is not waited for
        orchestrator.shutdown(wait=not timed_out, cancel_futures=timed_out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
