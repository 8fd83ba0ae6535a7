"""
storefront_bridge.catalog.service

URL-key lookup across the product and category indexes.

Responsibilities:
- Query a multi-index search client for a document bound to a URL key.
- Decide the entity kind from the index the hit came from.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storefront_bridge.catalog.models import CatalogEntity, Category, Product
from storefront_bridge.search.client import SearchClient

URL_KEY_FIELD = "url_key"


class CatalogService:
    def __init__(self, *, search: SearchClient, product_index: str, category_index: str) -> None:
        self._search = search
        # Longest name first so "product" never shadows "product_category".
        self._kinds: list[tuple[str, type[CatalogEntity]]] = sorted(
            [(product_index, Product), (category_index, Category)],
            key=lambda kind: len(kind[0]),
            reverse=True,
        )

    async def get_entity_by_url_key(self, url_key: str) -> CatalogEntity | None:
        res = await self._search.find(URL_KEY_FIELD, url_key)
        for hit in _hits(res):
            entity = self._entity_from_hit(hit)
            if entity is not None:
                return entity
        return None

    def _entity_from_hit(self, hit: Mapping[str, Any]) -> CatalogEntity | None:
        index = str(hit.get("_index") or "")
        source = hit.get("_source") or {}
        for name, model in self._kinds:
            if index == name or index.startswith(f"{name}_"):
                return model.model_validate(source)
        return None


def _hits(res: Any) -> list[Mapping[str, Any]]:
    if not isinstance(res, Mapping):
        return []
    hits = res.get("hits")
    if not isinstance(hits, Mapping):
        return []
    return [hit for hit in hits.get("hits") or [] if isinstance(hit, Mapping)]
