"""
storefront_bridge.session

Persistent authentication-flag storage.

Responsibilities:
- Key-value storage with per-entry expiry (volatile and SQL-backed).
- The boolean session store used by the auth coordinator.
"""

from storefront_bridge.session.storage import KeyValueStorage, MemoryStorage, SqlStorage
from storefront_bridge.session.store import SessionStore

__all__ = ["KeyValueStorage", "MemoryStorage", "SessionStore", "SqlStorage"]
