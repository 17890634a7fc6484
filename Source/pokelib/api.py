from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union
import requests

from .config import (
    SPECIES_LIST_URL,
    POKEMON_LIST_URL,
    LIST_LIMIT,
    REQUEST_TIMEOUT,
    DEFAULT_HEADERS,
)
from .errors import RemoteError
from .models import NamedResource, Pokemon, Species


logger = logging.getLogger(__name__)


class CatalogClient(Protocol):
    """What the fetch orchestrator needs from a remote data source."""

    def list_catalog(self) -> Sequence[NamedResource]: ...

    def list_all_children(self) -> Sequence[NamedResource]: ...

    def resolve(self, ref: NamedResource) -> Union[Species, Pokemon]: ...


class PokeApiClient:
    """Thin HTTP client for the PokeAPI v2 endpoints.

    Stateless apart from the pooled `requests.Session`, so one instance is
    shared by every background workflow. Failed requests are not retried.
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, list_limit: int = LIST_LIMIT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.list_limit = list_limit
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    # --- Listings ---
    def list_catalog(self) -> List[NamedResource]:
        return self._list(SPECIES_LIST_URL)

    def list_all_children(self) -> List[NamedResource]:
        return self._list(POKEMON_LIST_URL)

    # --- Records ---
    def resolve(self, ref: NamedResource) -> Union[Species, Pokemon]:
        data = self._get_json(ref.url)
        if "/pokemon-species/" in ref.url:
            return Species.from_json(data)
        if "/pokemon/" in ref.url:
            return Pokemon.from_json(data)
        raise RemoteError(f"Unsupported resource reference: {ref.url}", url=ref.url)

    def fetch_detail(self, ref: NamedResource) -> Species:
        record = self.resolve(ref)
        if not isinstance(record, Species):
            raise RemoteError(f"Not a species resource: {ref.url}", url=ref.url)
        return record

    # --- Core request ---
    def _list(self, url: str) -> List[NamedResource]:
        data = self._get_json(url, params={"limit": self.list_limit, "offset": 0})
        results = data.get("results")
        if not isinstance(results, list):
            raise RemoteError(f"Listing at {url} has no 'results' array", url=url)
        entries = [NamedResource.from_json(r) for r in results]
        logger.debug("Listed %d resources from %s", len(entries), url)
        return entries

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        resp = self._request("get", url, params=params)
        return self._json(resp, url)

    def _request(self, method: str, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        try:
            resp = self.session.request(method, url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise RemoteError(f"{method.upper()} {url} failed: {e}", url=url) from e
        self._raise_for_status(resp, url)
        return resp

    @staticmethod
    def _raise_for_status(resp: requests.Response, url: str) -> None:
        if resp.status_code == 404:
            raise RemoteError(f"Resource not found (404): {url}", status_code=404, url=url)
        if 400 <= resp.status_code < 600:
            body = (resp.text or "").strip()
            snippet = body[:200] + ("..." if len(body) > 200 else "")
            raise RemoteError(f"HTTP {resp.status_code}: {snippet}", status_code=resp.status_code, url=url)

    @staticmethod
    def _json(resp: requests.Response, url: str) -> Dict[str, Any]:
        try:
            data = resp.json()
        except (json.JSONDecodeError, ValueError):
            raise RemoteError(
                f"Invalid JSON response from {url}. Content-Type: {resp.headers.get('content-type')}",
                url=url,
            )
        if not isinstance(data, dict):
            raise RemoteError(f"Expected a JSON object from {url}, got {type(data).__name__}", url=url)
        return data
