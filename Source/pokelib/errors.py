from __future__ import annotations

from typing import Optional


class RemoteError(RuntimeError):
    """Raised by the PokeAPI client for any network, HTTP or payload problem.

    Covers connection failures and timeouts, non-2xx responses (404 is
    reported as "not found"), invalid JSON and payloads missing required keys.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
