"""
tests.conftest

Shared fixtures: controllable clock, in-memory storage and fake backend transports.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
import structlog

from storefront_bridge.session.storage import MemoryStorage
from storefront_bridge.session.store import SessionStore
from storefront_bridge.settings import Settings


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class FakeSearchTransport:
    """Records every request; answers with queued responses or raises queued errors."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[Any] = []

    async def request(self, url: str, *, method: str = "POST", body: Any = None) -> Any:
        self.calls.append({"url": url, "method": method, "body": body})
        response = self.responses.pop(0) if self.responses else {"hits": {"hits": []}}
        if isinstance(response, Exception):
            raise response
        return response


class FakeErp:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []
        self.routes: dict[tuple[str, str], Any] = {}

    def _answer(self, method: str, path: str) -> Any:
        response = self.routes.get((method, path), {"success": False})
        if isinstance(response, Exception):
            raise response
        return response

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        self.calls.append(("GET", path, params))
        return self._answer("GET", path)

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        self.calls.append(("POST", path, payload))
        return self._answer("POST", path)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        search_base_url="http://search.test",
        product_index="product",
        category_index="category",
        default_locale="en_US",
        erp_url="http://erp.test/shopinvader",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage(clock: FakeClock) -> MemoryStorage:
    return MemoryStorage(clock=clock)


@pytest.fixture
def session_store(storage: MemoryStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def search_transport() -> FakeSearchTransport:
    return FakeSearchTransport()


@pytest.fixture
def erp() -> FakeErp:
    return FakeErp()
