"""
storefront_bridge.session.storage

Key-value storage with per-entry expiry.

Responsibilities:
- Define the storage contract (`set_data` / `get_data` / `remove_item`).
- MemoryStorage: volatile implementation for tests and short-lived processes.
- SqlStorage: SQLAlchemy implementation that survives process restarts.

Expired entries behave exactly like missing ones and are dropped on read.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, Literal, Protocol

from sqlalchemy import delete
from sqlalchemy.orm import Session, sessionmaker

from storefront_bridge.db.models import StorageEntry

TtlUnit = Literal["s", "m", "h", "d"]
Clock = Callable[[], datetime]

_UNIT_SECONDS: dict[str, int] = {"s": 1, "m": 60, "h": 3600, "d": 86400}


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


def ttl_delta(amount: float, unit: TtlUnit) -> timedelta:
    try:
        return timedelta(seconds=amount * _UNIT_SECONDS[unit])
    except KeyError:
        raise ValueError(f"unknown ttl unit: {unit!r}") from None


class KeyValueStorage(Protocol):
    def set_data(
        self,
        key: str,
        value: Any,
        ttl_amount: float | None = None,
        ttl_unit: TtlUnit = "d",
    ) -> None: ...

    def get_data(self, key: str) -> Any | None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, *, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[Any, datetime | None]] = {}

    def set_data(
        self,
        key: str,
        value: Any,
        ttl_amount: float | None = None,
        ttl_unit: TtlUnit = "d",
    ) -> None:
        expires_at = None if ttl_amount is None else self._clock() + ttl_delta(ttl_amount, ttl_unit)
        self._entries[key] = (value, expires_at)

    def get_data(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    def remove_item(self, key: str) -> None:
        self._entries.pop(key, None)


def _naive_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round-trip; store and compare naive UTC.
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class SqlStorage:
    def __init__(self, session_factory: sessionmaker[Session], *, clock: Clock = utcnow) -> None:
        self._session_factory = session_factory
        self._clock = clock

    def set_data(
        self,
        key: str,
        value: Any,
        ttl_amount: float | None = None,
        ttl_unit: TtlUnit = "d",
    ) -> None:
        now = _naive_utc(self._clock())
        expires_at = None if ttl_amount is None else now + ttl_delta(ttl_amount, ttl_unit)
        with self._session_factory.begin() as session:
            session.merge(
                StorageEntry(key=key, value=value, expires_at=expires_at, updated_at=now)
            )

    def get_data(self, key: str) -> Any | None:
        with self._session_factory.begin() as session:
            entry = session.get(StorageEntry, key)
            if entry is None:
                return None
            if entry.expires_at is not None and entry.expires_at <= _naive_utc(self._clock()):
                session.delete(entry)
                return None
            return entry.value

    def remove_item(self, key: str) -> None:
        with self._session_factory.begin() as session:
            session.execute(delete(StorageEntry).where(StorageEntry.key == key))
