"""
storefront_bridge.api.routers.erp_proxy

Server-side proxy from the storefront to the ERP.

Responsibilities:
- Forward `/shopinvader/<path>` to `<erp_proxy_url>/<path>` with method, query and body.
- Attach the configured `Authorization` header so credentials never reach the browser.
- Relay the upstream status, body, content type and cookies unchanged.
"""

from __future__ import annotations

import httpx
import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_502_BAD_GATEWAY

from storefront_bridge.api.deps import settings_dep, upstream_http
from storefront_bridge.observability.logging import get_logger
from storefront_bridge.settings import Settings

log = get_logger(__name__)

router = APIRouter(prefix="/shopinvader", tags=["erp-proxy"])

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _upstream_headers(request: Request, settings: Settings) -> dict[str, str]:
    headers = {"Content-Type": request.headers.get("content-type") or "application/json"}
    if settings.erp_proxy_auth:
        headers["Authorization"] = settings.erp_proxy_auth
    if cookie := request.headers.get("cookie"):
        headers["Cookie"] = cookie
    request_id = structlog.contextvars.get_contextvars().get("request_id")
    if request_id:
        headers["X-Request-Id"] = request_id
    return headers


@router.api_route("/{path:path}", methods=PROXY_METHODS)
async def proxy(
    path: str,
    request: Request,
    settings: Settings = Depends(settings_dep),
    http: httpx.AsyncClient = Depends(upstream_http),
) -> Response:
    if not settings.erp_proxy_url:
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail="No proxy config found"
        )

    url = f"{settings.erp_proxy_url.rstrip('/')}/{path}"
    try:
        upstream = await http.request(
            request.method,
            url,
            params=list(request.query_params.multi_items()),
            content=await request.body(),
            headers=_upstream_headers(request, settings),
        )
    except httpx.RequestError as e:
        log.error("erp_proxy.upstream_unreachable", url=url, error=str(e))
        raise HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    response = Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )
    for cookie in upstream.headers.get_list("set-cookie"):
        response.headers.append("set-cookie", cookie)
    if upstream.is_error:
        log.warning("erp_proxy.upstream_error", url=url, status=upstream.status_code)
    return response


# --- Module Notes -----------------------------------------------------------
# Upstream 4xx/5xx answers are relayed as-is; only an unreachable upstream is
# turned into a proxy-side error.
