"""
storefront_bridge.routing.table

Route table keyed by path.

Responsibilities:
- Register route definitions, ignoring duplicate registrations.
- Resolve a path to its matched definitions.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from storefront_bridge.observability.logging import get_logger

log = get_logger(__name__)


class View(enum.StrEnum):
    home = "HomePage"
    account = "AccountPage"
    product_page = "ProductPage"
    category_page = "CategoryPage"


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    path: str
    view: View
    children: tuple[RouteDefinition, ...] = ()
    # Auth-only routes redirect anonymous visitors (see `routing.guard`).
    auth: bool = False


class RouteTable:
    def __init__(self, routes: Iterable[RouteDefinition] = ()) -> None:
        self._routes: dict[str, RouteDefinition] = {}
        for route in routes:
            self.add_route(route.path, route)

    def __len__(self) -> int:
        return len(self._routes)

    def has_route(self, path: str) -> bool:
        return path in self._routes

    def add_route(self, path: str, definition: RouteDefinition) -> bool:
        if path in self._routes:
            log.debug("routing.duplicate_route_ignored", path=path)
            return False
        self._routes[path] = definition
        return True

    def resolve(self, path: str) -> list[RouteDefinition]:
        route = self._routes.get(path)
        return [route] if route is not None else []
