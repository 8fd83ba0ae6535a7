"""
storefront_bridge.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): ready once an ERP upstream is configured.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from storefront_bridge.api.deps import settings_dep
from storefront_bridge.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    if not settings.erp_proxy_url:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="No proxy config found")
    return {"status": "ready"}
