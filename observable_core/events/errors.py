"""
Observable Events — Errors
============================
Failure types for the dispatch layer.

Listener failures are built for reporting only. They are handed to the
failure reporter and never raised out of emit().
"""

from __future__ import annotations

from enum import Enum


class EventBusError(Exception):
    """Base error for Event Bus operations."""
    pass


class FailureKind(Enum):
    """Where a listener failure was observed."""
    SYNCHRONOUS = "SYNCHRONOUS"  # raised during invocation
    DEFERRED = "DEFERRED"        # raised by the returned awaitable


class ListenerFailure(EventBusError):
    """A listener failed while handling an event."""

    kind = FailureKind.SYNCHRONOUS

    def __init__(
        self,
        label: str,
        event_type: str,
        index: int,
        error: BaseException,
        wildcard: bool = False,
    ):
        self.label = label
        self.event_type = event_type
        self.index = index
        self.error = error
        self.wildcard = wildcard
        self.__cause__ = error
        listener = "wildcard listener" if wildcard else "listener"
        super().__init__(
            f"Exception thrown by '{event_type}' {listener} #{index}: "
            f"{str(error) or type(error).__name__}"
        )


class SynchronousListenerFailure(ListenerFailure):
    """Listener raised while it was being invoked."""

    kind = FailureKind.SYNCHRONOUS


class DeferredListenerFailure(ListenerFailure):
    """Listener's awaitable raised after emit() returned."""

    kind = FailureKind.DEFERRED


class NoRunningLoopError(EventBusError):
    """Async listener fired while no asyncio event loop was running."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(
            f"Async listener for '{event_type}' needs a running event loop."
        )
