"""
storefront_bridge.search.client

Locale-aware search client.

Responsibilities:
- Execute search queries against the locale-suffixed endpoint.
- Rebuild the endpoint whenever the locale or the index set changes.
- Surface partial shard failures in logs without discarding results.
- Log and re-raise transport failures unchanged.
"""

from __future__ import annotations

import json
from typing import Any

from storefront_bridge.errors import ConfigurationError, TransportError
from storefront_bridge.locale import LocaleContext
from storefront_bridge.observability.logging import get_logger
from storefront_bridge.search.endpoint import IndexSet, build_endpoint, normalize_index_set
from storefront_bridge.search.failures import extract_failures
from storefront_bridge.search.transport import SearchTransport

log = get_logger(__name__)


def match_all() -> dict[str, Any]:
    return {"query": {"match_all": {}}}


class SearchClient:
    """
    Search client bound to one index set.

    When built with a `LocaleContext`, the client follows every context-wide locale
    change; `change_locale` can also be called directly for a single client.
    """

    def __init__(
        self,
        *,
        transport: SearchTransport,
        base_url: str,
        index_set: IndexSet,
        locale: LocaleContext | str,
    ) -> None:
        if not base_url:
            raise ConfigurationError("Search base url is required")
        self._transport = transport
        self._base_url = base_url
        self._index_set = normalize_index_set(index_set)
        if isinstance(locale, LocaleContext):
            self._locale = locale.current
            locale.subscribe(self.change_locale)
        else:
            self._locale = locale
        self._endpoint = build_endpoint(self._base_url, self._index_set, self._locale)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def index_set(self) -> tuple[str, ...]:
        return self._index_set

    def change_locale(self, locale: str) -> None:
        self._locale = locale
        self._rebuild()

    def change_indexes(self, index_set: IndexSet) -> None:
        self._index_set = normalize_index_set(index_set)
        self._rebuild()

    def _rebuild(self) -> None:
        self._endpoint = build_endpoint(self._base_url, self._index_set, self._locale)
        log.debug("search.endpoint_rebuilt", endpoint=self._endpoint)

    async def find(self, field: str, value: Any) -> Any:
        return await self.search({"query": {"terms": {field: [value]}}})

    async def search(self, body: dict[str, Any] | None = None) -> Any:
        if body is None:
            body = match_all()
        # Captured before suspending: a locale change during the await does not
        # redirect this request.
        url = self._endpoint
        try:
            res = await self._transport.request(url, method="POST", body=body)
        except TransportError as e:
            errors = extract_failures(e.data)
            if errors:
                log.error(
                    "search.failed",
                    status=e.status,
                    errors=errors,
                    request=json.dumps(body),
                )
            else:
                log.error(
                    "search.failed",
                    status=e.status,
                    error=str(e),
                    endpoint=url,
                    request=json.dumps(body),
                )
            raise

        # A 2xx does not mean every shard answered; keep the data and report.
        errors = extract_failures(res)
        if errors:
            log.warning("search.partial_failure", errors=errors, request=json.dumps(body))
        return res


# --- Module Notes -----------------------------------------------------------
# Retry policy belongs to callers; this client never retries.
