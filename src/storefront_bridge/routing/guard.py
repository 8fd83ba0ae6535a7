"""
storefront_bridge.routing.guard

Global navigation guard.

Responsibilities:
- Redirect anonymous visitors away from auth-only routes.
- Hand unknown paths to `EntityRouteResolver`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront_bridge.auth.coordinator import AuthCoordinator
from storefront_bridge.routing.resolver import EntityRouteResolver
from storefront_bridge.routing.table import RouteDefinition, RouteTable

HOME_PATH = "/"


@dataclass(frozen=True, slots=True)
class Navigation:
    path: str
    matched: list[RouteDefinition] = field(default_factory=list)
    redirect: str | None = None

    @property
    def not_found(self) -> bool:
        return self.redirect is None and not self.matched


class NavigationGuard:
    def __init__(
        self,
        *,
        auth: AuthCoordinator,
        routes: RouteTable,
        resolver: EntityRouteResolver,
    ) -> None:
        self._auth = auth
        self._routes = routes
        self._resolver = resolver

    async def navigate(self, path: str) -> Navigation:
        matched = self._routes.resolve(path)
        if any(route.auth for route in matched):
            if self._auth.get_user().value is None:
                return Navigation(path=path, redirect=HOME_PATH)
            return Navigation(path=path, matched=matched)
        if matched:
            return Navigation(path=path, matched=matched)
        return Navigation(path=path, matched=await self._resolver.resolve(path) or [])
