"""
storefront_bridge.services.shop_settings

Storefront options served by the ERP (countries, titles, currencies, ...).

Responsibilities:
- Load the options once a user is known.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from storefront_bridge.erp.client import ErpTransport
from storefront_bridge.observability.logging import get_logger

log = get_logger(__name__)


class ShopSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    countries: list[dict[str, Any]] = Field(default_factory=list)
    titles: list[dict[str, Any]] = Field(default_factory=list)
    currencies: list[dict[str, Any]] = Field(default_factory=list)
    languages: list[dict[str, Any]] = Field(default_factory=list)


class ShopSettingsService:
    def __init__(self, *, erp: ErpTransport) -> None:
        self._erp = erp
        self.options: ShopSettings | None = None

    async def init(self) -> ShopSettings:
        data = await self._erp.get("settings")
        self.options = ShopSettings.model_validate(data or {})
        log.info("shop_settings.loaded", countries=len(self.options.countries))
        return self.options
