"""
storefront_bridge.auth.coordinator

Client-side authentication state machine.

Responsibilities:
- Own the current user (Anonymous or Authenticated(user)).
- Persist the coarse session flag on every transition.
- Fan out "user loaded" / "user unloaded" notifications in registration order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from storefront_bridge.auth.models import Ref, User
from storefront_bridge.observability.logging import get_logger
from storefront_bridge.session.store import SessionStore

log = get_logger(__name__)

UserListener = Callable[[User | None], None]


def _check_listener(listener: Any) -> UserListener:
    if not callable(listener):
        raise TypeError(f"user listener must be callable, got {type(listener).__name__}")
    return listener


class AuthCoordinator:
    """
    Listeners run synchronously inside `set_user`, in registration order. A listener
    that raises stops the remaining fan-out and the exception reaches the caller.
    """

    def __init__(self, session: SessionStore) -> None:
        self._session = session
        self._user: Ref[User | None] = Ref(None)
        self._on_loaded: list[UserListener] = []
        self._on_unloaded: list[UserListener] = []

    def get_user(self) -> Ref[User | None]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user.value is not None

    def set_user(self, data: Mapping[str, Any] | User | None) -> User | None:
        if isinstance(data, User):
            user: User | None = data.model_copy()
        elif data is not None:
            user = User.model_validate(dict(data))
        else:
            user = None

        self._user.value = user
        self._session.set(user is not None)

        if user is not None:
            log.info("auth.user_loaded", user_id=user.id)
            listeners = list(self._on_loaded)
        else:
            log.info("auth.user_unloaded")
            listeners = list(self._on_unloaded)
        # Snapshot: a listener registered during this fan-out waits for the next transition.
        for listener in listeners:
            listener(user)
        return user

    def on_user_loaded(self, listener: UserListener) -> None:
        self._on_loaded.append(_check_listener(listener))

    def on_user_unloaded(self, listener: UserListener) -> None:
        self._on_unloaded.append(_check_listener(listener))

    def get_session(self) -> bool:
        return self._session.get()
