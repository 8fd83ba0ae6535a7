"""
storefront_bridge.erp.client

HTTP client boundary to the ERP backend (auth, cart, settings, ...).

Responsibilities:
- Define the transport contract used by the auth and settings services.
- Attach the configured API key.
- Translate HTTP failures into `TransportError`.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from storefront_bridge.http import json_body, translate_http_errors
from storefront_bridge.settings import Settings


class ErpTransport(Protocol):
    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any: ...

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> Any: ...


class ErpClient:
    """
    The httpx client is expected to carry `base_url=settings.erp_url`; it also keeps
    the ERP session cookie between calls.
    """

    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    def _headers(self) -> dict[str, str]:
        if not self._settings.erp_api_key:
            return {}
        return {"API-KEY": self._settings.erp_api_key}

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        with translate_http_errors():
            r = await self._http.get(path, params=params, headers=self._headers())
            r.raise_for_status()
        return json_body(r)

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        with translate_http_errors():
            r = await self._http.post(path, json=payload or {}, headers=self._headers())
            r.raise_for_status()
        return json_body(r)


# --- Module Notes -----------------------------------------------------------
# Paths are relative ("auth/login"), resolved against the client's base_url.
