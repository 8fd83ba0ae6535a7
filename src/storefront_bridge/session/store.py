"""
storefront_bridge.session.store

Coarse "is authenticated" flag with a time-to-live.

Responsibilities:
- Persist the flag with a fixed expiry.
- Report never-set and expired identically (`False`).

Only the boolean is stored, never the user's identity or profile, so a cleared
profile can never leave a flag pointing at missing data.
"""

from __future__ import annotations

from storefront_bridge.session.storage import KeyValueStorage

SESSION_KEY = "auth_user"
DEFAULT_TTL_DAYS = 10


class SessionStore:
    def __init__(self, storage: KeyValueStorage, *, ttl_days: int = DEFAULT_TTL_DAYS) -> None:
        self._storage = storage
        self._ttl_days = ttl_days

    def set(self, value: bool) -> None:
        if value:
            self._storage.set_data(SESSION_KEY, True, self._ttl_days, "d")
        else:
            self.clear()

    def clear(self) -> None:
        self._storage.remove_item(SESSION_KEY)

    def get(self) -> bool:
        # Anything but a stored `True` (missing, expired, corrupted) reads as anonymous.
        return self._storage.get_data(SESSION_KEY) is True
