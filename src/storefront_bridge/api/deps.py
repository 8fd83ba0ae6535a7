"""
storefront_bridge.api.deps

FastAPI dependency wiring for the proxy app.

Responsibilities:
- Provide the app's settings and upstream HTTP client from app.state.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from storefront_bridge.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Set by `storefront_bridge.api.app.create_app`; tests inject their own Settings there.
    return request.app.state.settings  # type: ignore[attr-defined]


def upstream_http(request: Request) -> httpx.AsyncClient:
    # Created on app startup and closed on shutdown.
    return request.app.state.upstream_http  # type: ignore[attr-defined]
