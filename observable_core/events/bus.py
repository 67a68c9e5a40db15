"""
Observable Events — EventBus
===============================
Per-instance event emitter: registry + dispatcher + bubbling.

Each bus owns a private registry. Buses share nothing; bubbling
composes them through ordinary listener registration.

Usage:
    bus = EventBus(label="Session")
    index = bus.register("login", on_login)
    bus.emit("login", "alice")
    bus.unregister("login", index)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from observable_core.config.settings import EventBusSettings, get_default_settings
from observable_core.events.bubbling import bubble
from observable_core.events.dispatcher import dispatch
from observable_core.events.registry import WILDCARD, Listener, ListenerRegistry
from observable_core.events.reporting import FailureReporter, LoggingReporter


class EventBus:
    """
    In-process event emitter with wildcard listeners and bubbling.

    Subclass it to make an object observable; the subclass name then
    labels failure reports unless an explicit label is given.
    """

    WILDCARD = WILDCARD

    def __init__(
        self,
        label: Optional[str] = None,
        reporter: Optional[FailureReporter] = None,
        settings: Optional[EventBusSettings] = None,
    ) -> None:
        self._settings = settings or get_default_settings()
        self._label = self._resolve_label(label)
        self._reporter = reporter or LoggingReporter(self._settings.logger_name)
        self._registry = ListenerRegistry(self._settings.logger_name)
        self._logger = logging.getLogger(self._settings.logger_name)
        self._trace_logger: Optional[logging.Logger] = (
            self._logger if self._settings.trace_dispatch else None
        )

    def _resolve_label(self, label: Optional[str]) -> str:
        if isinstance(label, str) and label.strip():
            return label
        name = getattr(type(self), "__name__", None)
        if isinstance(name, str) and name:
            return name
        return self._settings.fallback_label

    # ── Introspection ────────────────────────────────────────

    @property
    def label(self) -> str:
        return self._label

    @property
    def settings(self) -> EventBusSettings:
        return self._settings

    def has_listeners(self, event_type: str) -> bool:
        return self._registry.has_listeners(event_type)

    def listener_count(self, event_type: str) -> int:
        return self._registry.listener_count(event_type)

    def event_types(self) -> frozenset[str]:
        return self._registry.event_types()

    # ── Registration ─────────────────────────────────────────

    def register(
        self,
        event_type: str,
        callback: Listener,
        is_async: Optional[bool] = None,
    ) -> int:
        """Add a listener; returns the index to pass to unregister()."""
        return self._registry.register(event_type, callback, is_async=is_async)

    def unregister(self, event_type: str, index: int) -> None:
        """Remove a listener. Unknown types and indices are ignored."""
        self._registry.unregister(event_type, index)

    def clear(self) -> None:
        """Remove every listener on this bus."""
        self._registry.clear()

    # ── Dispatch ─────────────────────────────────────────────

    def emit(self, event_type: str, *args: Any, **kwargs: Any) -> Optional[asyncio.Future]:
        """
        Invoke listeners for event_type, then wildcard listeners.

        Returns None unless a listener returned an awaitable; then a
        future that completes when all of them have settled. That
        future does not fail because of listener errors: those are
        reported and absorbed.
        """
        return dispatch(
            event_type,
            args,
            kwargs,
            registry=self._registry,
            label=self._label,
            reporter=self._reporter,
            trace_logger=self._trace_logger,
            failure_logger=self._logger,
        )

    def bubble_from(self, source: "EventBus", *event_types: str) -> list[tuple[str, int]]:
        """
        Re-emit event_types from source on this bus.

        WILDCARD forwards every type under its original name.
        Cycles (a bubbles from b, b from a) are the caller's problem.
        """
        return bubble(self, source, *event_types)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} label={self._label!r}>"
