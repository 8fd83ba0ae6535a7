"""
tests.test_auth_service

ERP-backed auth flows: login, logout, registration and silent re-authentication.
"""

from __future__ import annotations

import httpx
import pytest

from storefront_bridge.auth.coordinator import AuthCoordinator
from storefront_bridge.auth.models import AuthResult
from storefront_bridge.auth.service import AuthService
from storefront_bridge.erp.client import ErpClient
from storefront_bridge.errors import TransportError
from storefront_bridge.settings import Settings


@pytest.fixture
def coordinator(session_store) -> AuthCoordinator:
    return AuthCoordinator(session_store)


@pytest.fixture
def auth(erp, coordinator) -> AuthService:
    return AuthService(erp=erp, coordinator=coordinator)


def test_auth_result_parsing() -> None:
    assert not AuthResult.from_response(None)
    assert not AuthResult.from_response({"success": "true"})
    assert not AuthResult.from_response({"error": "nope"})
    ok = AuthResult.from_response({"success": True, "data": {"id": 1}})
    assert ok and ok.data == {"id": 1}
    flat = AuthResult.from_response({"success": True, "id": 2, "name": "Ada"})
    assert flat.data == {"id": 2, "name": "Ada"}


@pytest.mark.asyncio
async def test_login_success_loads_user(auth, erp, coordinator) -> None:
    erp.routes[("POST", "auth/login")] = {"success": True, "data": {"id": 5, "name": "Ada"}}
    loaded: list[object] = []
    coordinator.on_user_loaded(loaded.append)

    result = await auth.login("ada@example.com", "secret")

    assert result
    assert coordinator.get_user().value.id == 5
    assert coordinator.get_session() is True
    assert len(loaded) == 1
    assert erp.calls == [
        ("POST", "auth/login", {"login": "ada@example.com", "password": "secret"})
    ]


@pytest.mark.asyncio
async def test_login_success_without_user_fields_is_authenticated(auth, erp, coordinator) -> None:
    erp.routes[("POST", "auth/login")] = {"success": True}
    events: list[str] = []
    coordinator.on_user_loaded(lambda u: events.append("loaded"))
    coordinator.on_user_unloaded(lambda u: events.append("unloaded"))

    result = await auth.login("a", "b")

    assert result
    assert coordinator.get_user().value is not None
    assert coordinator.get_session() is True
    assert events == ["loaded"]


@pytest.mark.asyncio
async def test_login_without_success_is_falsy_and_stays_anonymous(auth, erp, coordinator) -> None:
    erp.routes[("POST", "auth/login")] = {"success": False, "message": "bad credentials"}
    result = await auth.login("ada@example.com", "wrong")
    assert not result
    assert coordinator.get_user().value is None


@pytest.mark.asyncio
async def test_logout_clears_state_even_when_erp_fails(auth, erp, coordinator) -> None:
    coordinator.set_user({"id": 1})
    erp.routes[("POST", "auth/logout")] = TransportError("down", status=502)
    with pytest.raises(TransportError):
        await auth.logout()
    assert coordinator.get_user().value is None
    assert coordinator.get_session() is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("name", "password", "login"),
    [("", "pw", "ada"), ("Ada", "", "ada"), ("Ada", "pw", "")],
)
async def test_register_with_missing_field_skips_the_network(auth, erp, name, password, login) -> None:
    result = await auth.register_user(name, password, login)
    assert result == AuthResult(success=False)
    assert erp.calls == []


@pytest.mark.asyncio
async def test_register_posts_payload(auth, erp) -> None:
    erp.routes[("POST", "auth/register")] = {"success": True}
    result = await auth.register_user("Ada", "pw", "ada@example.com")
    assert result
    assert erp.calls == [
        ("POST", "auth/register", {"name": "Ada", "login": "ada@example.com", "password": "pw"})
    ]


@pytest.mark.asyncio
async def test_me_without_session_does_not_call_erp(auth, erp) -> None:
    assert await auth.me() is None
    assert erp.calls == []


@pytest.mark.asyncio
async def test_me_with_session_reloads_user(auth, erp, session_store, coordinator) -> None:
    session_store.set(True)
    erp.routes[("GET", "auth/me")] = {"success": True, "data": {"id": 9, "name": "Grace"}}
    user = await auth.me()
    assert user is not None and user.id == 9
    assert coordinator.get_user().value is user


@pytest.mark.asyncio
async def test_me_with_rejected_session_clears_flag(auth, erp, session_store) -> None:
    session_store.set(True)
    erp.routes[("GET", "auth/me")] = TransportError("401 Unauthorized", status=401)
    assert await auth.me() is None
    assert session_store.get() is False


@pytest.mark.asyncio
async def test_me_propagates_other_transport_errors(auth, erp, session_store) -> None:
    session_store.set(True)
    erp.routes[("GET", "auth/me")] = TransportError("503 Service Unavailable", status=503)
    with pytest.raises(TransportError):
        await auth.me()
    assert session_store.get() is True


@pytest.mark.asyncio
async def test_erp_client_sends_api_key_and_translates_errors() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/auth/login"):
            return httpx.Response(200, json={"success": True, "data": {"id": 1}})
        return httpx.Response(500, json={"message": "boom"})

    settings = Settings(env="test", erp_url="http://erp.test/shopinvader", erp_api_key="k-123")
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://erp.test/shopinvader/"
    ) as http:
        client = ErpClient(settings=settings, http=http)
        assert await client.post("auth/login", {"login": "a"}) == {
            "success": True,
            "data": {"id": 1},
        }
        with pytest.raises(TransportError) as exc_info:
            await client.get("settings")

    assert str(seen[0].url) == "http://erp.test/shopinvader/auth/login"
    assert seen[0].headers["API-KEY"] == "k-123"
    assert exc_info.value.status == 500
    assert exc_info.value.data == {"message": "boom"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [httpx.Response(204), httpx.Response(200, text="<html>gateway</html>")],
)
async def test_erp_client_non_json_success_body_is_a_transport_error(response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    settings = Settings(env="test", erp_url="http://erp.test/shopinvader")
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://erp.test/shopinvader/"
    ) as http:
        client = ErpClient(settings=settings, http=http)
        with pytest.raises(TransportError) as exc_info:
            await client.post("auth/logout")

    assert exc_info.value.status == response.status_code


@pytest.mark.asyncio
async def test_logout_with_empty_erp_answer_still_clears_state(coordinator) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    settings = Settings(env="test", erp_url="http://erp.test/shopinvader")
    coordinator.set_user({"id": 1})
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://erp.test/shopinvader/"
    ) as http:
        service = AuthService(erp=ErpClient(settings=settings, http=http), coordinator=coordinator)
        with pytest.raises(TransportError):
            await service.logout()

    assert coordinator.get_user().value is None
