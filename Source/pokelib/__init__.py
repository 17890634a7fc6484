"""PokéLib: browse PokeAPI species and their forms.

Contains the PokeAPI client, the shared application state and the background
loaders that fill it.
"""

from .api import PokeApiClient, CatalogClient  # re-export for convenience
from .errors import RemoteError
from .models import NamedResource, Species, Pokemon, StatValue, SelectedSpecies
from .state import AppState, Slot, StateSnapshot
from .orchestrator import FetchOrchestrator
