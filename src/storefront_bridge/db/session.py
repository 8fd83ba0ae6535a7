"""
storefront_bridge.db.session

SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the engine from settings.
- Create the sessionmaker with safe defaults.
"""

from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from storefront_bridge.settings import Settings


def create_storage_engine(settings: Settings) -> Engine:
    # Storage access is local and synchronous; pool_pre_ping guards long-lived processes.
    return create_engine(settings.storage_url, pool_pre_ping=True)


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
