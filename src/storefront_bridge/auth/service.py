"""
storefront_bridge.auth.service

ERP-backed authentication flows.

Responsibilities:
- Login, logout and registration calls against the ERP.
- Silent re-authentication at startup when the session flag is still valid.
- Feed every known outcome into `AuthCoordinator`.

No retries or backoff: a failed call is either a falsy `AuthResult` (the ERP answered
without `success: true`) or a propagated `TransportError`.
"""

from __future__ import annotations

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from storefront_bridge.auth.coordinator import AuthCoordinator
from storefront_bridge.auth.models import AuthResult, User
from storefront_bridge.erp.client import ErpTransport
from storefront_bridge.errors import TransportError
from storefront_bridge.observability.logging import get_logger

log = get_logger(__name__)


class AuthService:
    def __init__(self, *, erp: ErpTransport, coordinator: AuthCoordinator) -> None:
        self._erp = erp
        self._coordinator = coordinator

    async def me(self) -> User | None:
        """
        Silent re-authentication: only hits the ERP when a session flag survives.
        """

        if not self._coordinator.get_session():
            return None
        try:
            response = await self._erp.get("auth/me")
        except TransportError as e:
            if e.status in (HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN):
                # The ERP no longer knows this client; drop the stale flag.
                log.info("auth.session_expired", status=e.status)
                return self._coordinator.set_user(None)
            raise
        result = AuthResult.from_response(response)
        return self._coordinator.set_user(result.data if result else None)

    async def login(self, login: str, password: str) -> AuthResult:
        if not (login and password):
            return AuthResult(success=False)
        result = AuthResult.from_response(
            await self._erp.post("auth/login", {"login": login, "password": password})
        )
        if result:
            self._coordinator.set_user(result.data)
        else:
            log.info("auth.login_rejected", login=login)
        return result

    async def logout(self) -> None:
        try:
            await self._erp.post("auth/logout")
        finally:
            # Local state is cleared even when the ERP call fails.
            self._coordinator.set_user(None)

    async def register_user(self, name: str, password: str, login: str) -> AuthResult:
        if not (login and password and name):
            return AuthResult(success=False)
        result = AuthResult.from_response(
            await self._erp.post(
                "auth/register",
                {"name": name, "login": login, "password": password},
            )
        )
        if not result:
            log.info("auth.registration_rejected", login=login)
        return result
