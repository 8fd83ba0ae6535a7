"""
storefront_bridge.db.init_db

Schema bootstrap.

Responsibilities:
- Create the storage table if it does not exist.
"""

from __future__ import annotations

from sqlalchemy import Engine

from storefront_bridge.db import models  # noqa: F401  (registers tables on Base.metadata)
from storefront_bridge.db.base import Base


def init_db(engine: Engine) -> None:
    # No migrations: the storage schema is a single table created on demand.
    with engine.begin() as conn:
        Base.metadata.create_all(conn)
