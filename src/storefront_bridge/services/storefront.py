"""
storefront_bridge.services.storefront

Composition root for the client-side services.

Responsibilities:
- Wire search clients, catalog, ERP client, session store and auth state together.
- Share one `LocaleContext` across every search client.
- Run the startup sequence: hook shop settings to "user loaded", then silently
  re-authenticate when a session flag survives.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from storefront_bridge.auth.coordinator import AuthCoordinator
from storefront_bridge.auth.models import User
from storefront_bridge.auth.service import AuthService
from storefront_bridge.catalog.service import CatalogService
from storefront_bridge.db.init_db import init_db
from storefront_bridge.db.session import create_sessionmaker, create_storage_engine
from storefront_bridge.erp.client import ErpClient
from storefront_bridge.http import create_http_client
from storefront_bridge.locale import LocaleContext
from storefront_bridge.observability.logging import get_logger
from storefront_bridge.routing.guard import NavigationGuard
from storefront_bridge.routing.resolver import EntityRouteResolver
from storefront_bridge.routing.table import RouteTable
from storefront_bridge.search.client import SearchClient
from storefront_bridge.search.transport import HttpSearchTransport
from storefront_bridge.services.shop_settings import ShopSettingsService
from storefront_bridge.session.storage import KeyValueStorage, SqlStorage
from storefront_bridge.session.store import SessionStore
from storefront_bridge.settings import Settings

log = get_logger(__name__)


class Storefront:
    def __init__(
        self,
        *,
        settings: Settings,
        search_http: httpx.AsyncClient,
        erp_http: httpx.AsyncClient,
        storage: KeyValueStorage,
        routes: RouteTable | None = None,
    ) -> None:
        self.settings = settings
        self.locale = LocaleContext(settings.default_locale)

        transport = HttpSearchTransport(http=search_http)
        self.products = SearchClient(
            transport=transport,
            base_url=settings.search_base_url,
            index_set=settings.product_index,
            locale=self.locale,
        )
        self.categories = SearchClient(
            transport=transport,
            base_url=settings.search_base_url,
            index_set=settings.category_index,
            locale=self.locale,
        )
        self.catalog = CatalogService(
            search=SearchClient(
                transport=transport,
                base_url=settings.search_base_url,
                index_set=[settings.product_index, settings.category_index],
                locale=self.locale,
            ),
            product_index=settings.product_index,
            category_index=settings.category_index,
        )

        self.erp = ErpClient(settings=settings, http=erp_http)
        self.session = SessionStore(storage, ttl_days=settings.session_ttl_days)
        self.auth_state = AuthCoordinator(self.session)
        self.auth = AuthService(erp=self.erp, coordinator=self.auth_state)
        self.shop_settings = ShopSettingsService(erp=self.erp)

        self.routes = routes if routes is not None else RouteTable()
        self.route_resolver = EntityRouteResolver(catalog=self.catalog, routes=self.routes)
        self.navigation = NavigationGuard(
            auth=self.auth_state,
            routes=self.routes,
            resolver=self.route_resolver,
        )

        self._background: set[asyncio.Task[object]] = set()
        self._started = False

    def change_locale(self, locale: str) -> None:
        self.locale.change(locale)

    async def start(self) -> User | None:
        """
        Startup sequence. Shop settings load only after a "user loaded" notification.
        """

        if not self._started:
            self.auth_state.on_user_loaded(self._schedule_settings_init)
            self._started = True
        return await self.auth.me()

    def _schedule_settings_init(self, _user: User | None) -> None:
        # Listeners are synchronous; the ERP call runs as its own task.
        task = asyncio.get_running_loop().create_task(self.shop_settings.init())
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task[object]) -> None:
        self._background.discard(task)
        if not task.cancelled() and task.exception() is not None:
            log.error("storefront.background_failed", error=repr(task.exception()))

    async def wait_background(self) -> None:
        if self._background:
            await asyncio.gather(*list(self._background))


@asynccontextmanager
async def open_storefront(
    settings: Settings,
    *,
    routes: RouteTable | None = None,
) -> AsyncIterator[Storefront]:
    """
    Build a storefront with real httpx clients and SQL-backed session storage.
    """

    engine = create_storage_engine(settings)
    init_db(engine)
    storage = SqlStorage(create_sessionmaker(engine))
    search_http = create_http_client(timeout=settings.http_timeout_seconds)
    erp_http = create_http_client(
        base_url=settings.erp_url.rstrip("/") + "/",
        timeout=settings.http_timeout_seconds,
    )
    try:
        yield Storefront(
            settings=settings,
            search_http=search_http,
            erp_http=erp_http,
            storage=storage,
            routes=routes,
        )
    finally:
        await search_http.aclose()
        await erp_http.aclose()
        engine.dispose()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Storefront` directly with httpx.MockTransport clients and
# `MemoryStorage`; `open_storefront` is the production entry point.
