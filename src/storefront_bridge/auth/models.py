"""
storefront_bridge.auth.models

Auth domain models.

Responsibilities:
- Define the signed-in user snapshot (`User`).
- Define the falsy-on-failure result of ERP auth calls (`AuthResult`).
- Provide the live reference type returned by `AuthCoordinator.get_user`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class User(BaseModel):
    """
    Immutable snapshot of the signed-in customer as reported by the ERP.

    Unknown profile fields are kept as extras so the snapshot is never lossy.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int | str | None = None
    name: str | None = None
    email: str | None = None
    login: str | None = None


@dataclass(frozen=True, slots=True)
class AuthResult:
    success: bool
    data: dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def from_response(cls, response: Any) -> AuthResult:
        # Anything without an explicit `success: true` counts as a failed attempt.
        if not isinstance(response, Mapping):
            return cls(success=False)
        if response.get("success") is not True:
            return cls(success=False, data=dict(response))
        data = response.get("data")
        if not isinstance(data, Mapping):
            data = {k: v for k, v in response.items() if k != "success"}
        return cls(success=True, data=dict(data))


class Ref(Generic[T]):
    """
    Live reference: holders always read the current value.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Ref({self._value!r})"
