"""
storefront_bridge.locale

Process-wide active locale with explicit change notification.

Responsibilities:
- Hold exactly one active locale code.
- Notify subscribers (search clients) synchronously when it changes.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront_bridge.observability.logging import get_logger

log = get_logger(__name__)

LocaleListener = Callable[[str], None]


class LocaleContext:
    def __init__(self, locale: str) -> None:
        self._current = locale
        self._listeners: list[LocaleListener] = []

    @property
    def current(self) -> str:
        return self._current

    def subscribe(self, listener: LocaleListener) -> None:
        if not callable(listener):
            raise TypeError(f"locale listener must be callable, got {type(listener).__name__}")
        self._listeners.append(listener)

    def change(self, locale: str) -> None:
        """
        Commit a new locale and notify every subscriber before returning.

        Searches already awaiting a response keep the endpoint they started with.
        """

        if locale == self._current:
            return
        previous, self._current = self._current, locale
        log.info("locale.changed", previous=previous, locale=locale)
        for listener in list(self._listeners):
            listener(locale)
