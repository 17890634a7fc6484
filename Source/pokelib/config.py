import os

BASE_URL = os.getenv("POKELIB_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")

# Endpoints
SPECIES_LIST_URL = os.getenv("POKELIB_SPECIES_URL", f"{BASE_URL}/pokemon-species")
POKEMON_LIST_URL = os.getenv("POKELIB_POKEMON_URL", f"{BASE_URL}/pokemon")

# Listings are fetched in a single request of up to this many entries
LIST_LIMIT = int(os.getenv("POKELIB_LIST_LIMIT", "100000"))
REQUEST_TIMEOUT = float(os.getenv("POKELIB_TIMEOUT", "15"))

# Background workers
WORKFLOW_WORKERS = int(os.getenv("POKELIB_WORKERS", "4"))
CHILD_WORKERS = int(os.getenv("POKELIB_CHILD_WORKERS", "4"))
DISCARD_STALE = os.getenv("POKELIB_DISCARD_STALE", "0").strip().lower() in ("1", "true", "yes", "on")

# GUI redraw interval
POLL_MS = int(os.getenv("POKELIB_POLL_MS", "100"))

APP_NAME = "PokéLib"

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "PokeLib/0.1 (+https://pokeapi.co)",
}
