"""
storefront_bridge.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for search, ERP, storage and the proxy app.
- Hide secrets from repr/logging (ERP keys, proxy auth header).
- Offer a cached settings instance for the composition root.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "storefront-bridge"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Search cluster; index names are suffixed with the active locale.
    search_base_url: str = "http://localhost:9200"
    product_index: str = "shopinvader_product"
    category_index: str = "shopinvader_category"
    default_locale: str = "en_US"

    # ERP backend
    erp_url: str = "http://localhost:8069/shopinvader"
    erp_api_key: str | None = Field(default=None, repr=False)

    # ERP proxy (served by `storefront_bridge.api`); unset disables forwarding.
    erp_proxy_url: str | None = None
    erp_proxy_auth: str | None = Field(default=None, repr=False)

    # Persistent key-value storage backing the session flag.
    storage_url: str = "sqlite:///./storefront.db"
    session_ttl_days: int = 10

    http_timeout_seconds: float = 10.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for every consumer.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly instead of going through the cached accessor.
