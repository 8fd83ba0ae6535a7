"""
storefront_bridge.http

Shared httpx plumbing for backend transports.

Responsibilities:
- Build `httpx.AsyncClient` instances with settings-driven timeouts.
- Translate httpx failures into `TransportError` at the transport boundary.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import httpx

from storefront_bridge.errors import TransportError


def create_http_client(
    *,
    base_url: str = "",
    timeout: float,
    headers: Mapping[str, str] | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=dict(headers or {}))


def response_data(response: httpx.Response) -> Any:
    # Error bodies are usually JSON with the same shape as a successful body; fall back to text.
    try:
        return response.json()
    except ValueError:
        return response.text or None


def json_body(response: httpx.Response) -> Any:
    # A 2xx without a JSON body (empty 204, HTML from a misrouted gateway) is a transport failure.
    try:
        return response.json()
    except ValueError as e:
        raise TransportError(
            f"Invalid JSON body in {response.status_code} response",
            status=response.status_code,
            data=response.text or None,
        ) from e


@contextmanager
def translate_http_errors() -> Iterator[None]:
    try:
        yield
    except httpx.HTTPStatusError as e:
        raise TransportError(
            str(e),
            status=e.response.status_code,
            data=response_data(e.response),
        ) from e
    except httpx.RequestError as e:
        raise TransportError(str(e) or e.__class__.__name__) from e


# --- Module Notes -----------------------------------------------------------
# Callers wrap both the request and `raise_for_status()` so status and network
# errors surface as the same exception type.
