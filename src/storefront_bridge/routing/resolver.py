"""
storefront_bridge.routing.resolver

Lazy routes for catalog entities.

Responsibilities:
- For a path the route table does not know, look up the catalog entity bound to it.
- Pick the view variant from the entity kind and install the route once.
- Return the matched routes so the in-flight navigation completes against it.
"""

from __future__ import annotations

from typing import Any, Protocol

from storefront_bridge.catalog.models import Category, Product
from storefront_bridge.observability.logging import get_logger
from storefront_bridge.routing.table import RouteDefinition, RouteTable, View

log = get_logger(__name__)

VIEW_BY_KIND: tuple[tuple[type, View], ...] = (
    (Product, View.product_page),
    (Category, View.category_page),
)


class EntityLookup(Protocol):
    async def get_entity_by_url_key(self, url_key: str) -> Any | None: ...


def view_for(entity: Any) -> View | None:
    for kind, view in VIEW_BY_KIND:
        if isinstance(entity, kind):
            return view
    return None


class EntityRouteResolver:
    def __init__(self, *, catalog: EntityLookup, routes: RouteTable) -> None:
        self._catalog = catalog
        self._routes = routes

    async def resolve(self, path: str) -> list[RouteDefinition] | None:
        """
        Return the matched routes for `path`, or None when it stays unresolved.

        A path that already has a route is answered from the table without a lookup.
        """

        if self._routes.has_route(path):
            return self._routes.resolve(path)

        url_key = path.removeprefix("/")
        entity = await self._catalog.get_entity_by_url_key(url_key)
        if entity is None:
            log.info("routing.entity_not_found", path=path)
            return None

        view = view_for(entity)
        if view is None:
            log.warning("routing.unknown_entity_kind", path=path, kind=type(entity).__name__)
            return None

        self._routes.add_route(path, RouteDefinition(path=path, view=view, children=()))
        log.info("routing.entity_route_installed", path=path, view=str(view))
        return self._routes.resolve(path)


# --- Module Notes -----------------------------------------------------------
# Installed routes are never evicted; a catalog change is picked up on the next
# process start.
