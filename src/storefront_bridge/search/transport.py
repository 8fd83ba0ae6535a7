"""
storefront_bridge.search.transport

HTTP boundary to the search cluster.

Responsibilities:
- Define the transport contract used by `SearchClient`.
- Provide the default httpx-backed implementation.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from storefront_bridge.http import json_body, translate_http_errors


class SearchTransport(Protocol):
    async def request(self, url: str, *, method: str = "POST", body: Any = None) -> Any:
        """Send `body` as JSON and return the decoded response; raise `TransportError`."""
        ...


class HttpSearchTransport:
    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def request(self, url: str, *, method: str = "POST", body: Any = None) -> Any:
        with translate_http_errors():
            r = await self._http.request(method, url, json=body)
            r.raise_for_status()
        return json_body(r)
