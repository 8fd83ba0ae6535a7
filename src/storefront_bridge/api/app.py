"""
storefront_bridge.api.app

FastAPI app factory for the ERP proxy.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the shared upstream HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from storefront_bridge.api.routers.erp_proxy import router as erp_proxy_router
from storefront_bridge.api.routers.health import router as health_router
from storefront_bridge.http import create_http_client
from storefront_bridge.observability.logging import configure_logging, get_logger
from storefront_bridge.observability.middleware import RequestContextMiddleware
from storefront_bridge.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, upstream: httpx.AsyncClient | None = None) -> FastAPI:
    """
    `upstream` replaces the HTTP client used to reach the ERP (tests pass one backed
    by `httpx.MockTransport`); it is closed on shutdown either way.
    """

    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        cache_loggers=settings.env != "test",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, upstream=settings.erp_proxy_url)
        app.state.upstream_http = (
            upstream
            if upstream is not None
            else create_http_client(timeout=settings.http_timeout_seconds)
        )
        try:
            yield
        finally:
            await app.state.upstream_http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Storefront Bridge ERP Proxy",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(erp_proxy_router)

    return app
