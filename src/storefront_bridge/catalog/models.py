"""
storefront_bridge.catalog.models

Catalog entities built from search hits.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CatalogEntity(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: int | str | None = None
    name: str | None = None
    url_key: str | None = None


class Product(CatalogEntity):
    sku: str | None = None


class Category(CatalogEntity):
    level: int | None = None
    parent_id: int | str | None = None
