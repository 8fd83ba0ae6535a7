"""
storefront_bridge.errors

Domain exceptions shared by the search, ERP and routing layers.

Responsibilities:
- Distinguish fatal configuration problems from transport failures.
- Carry the structured fields (status/data/message) callers rely on for diagnostics.

Partial shard failures and failed logins are deliberately not exceptions: the former
are logged by `search.client.SearchClient`, the latter are reported as a falsy
`auth.models.AuthResult`.
"""

from __future__ import annotations

from typing import Any


class StorefrontError(Exception):
    pass


class ConfigurationError(StorefrontError):
    """
    Missing or invalid configuration (e.g. an empty index set). Not recoverable.
    """


class TransportError(StorefrontError):
    """
    Network or HTTP failure reported by a backend transport.

    `data` has the same shape as a successful response body when the backend sent
    one, so failure extraction can run on it.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    def __repr__(self) -> str:
        return f"TransportError(status={self.status!r}, message={self.message!r})"


# --- Module Notes -----------------------------------------------------------
# Transport implementations translate their client library's errors into
# `TransportError` at the boundary; nothing above that layer imports httpx errors.
