"""
storefront_bridge.db.models

Persistence schema for client-side state that must survive restarts.

Responsibilities:
- StorageEntry: one key-value pair with an optional expiry.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront_bridge.db.base import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    # Naive UTC; None means the entry never expires.
    expires_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


# --- Module Notes -----------------------------------------------------------
# Expired rows are removed lazily on read; there is no background sweeper.
