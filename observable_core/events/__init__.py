"""
Observable Events — Public API
=================================
Per-instance event emitter with wildcard listeners,
failure-isolated dispatch, and bubbling between emitters.
"""

from observable_core.events.bus import EventBus
from observable_core.events.dispatcher import dispatch
from observable_core.events.errors import (
    DeferredListenerFailure,
    EventBusError,
    FailureKind,
    ListenerFailure,
    NoRunningLoopError,
    SynchronousListenerFailure,
)
from observable_core.events.registry import NO_SLOT, WILDCARD, ListenerRegistry, Slot
from observable_core.events.reporting import (
    FailureReporter,
    LoggingReporter,
    RecordingReporter,
)

__all__ = [
    "WILDCARD",
    "NO_SLOT",
    "EventBus",
    "ListenerRegistry",
    "Slot",
    "dispatch",
    "FailureReporter",
    "LoggingReporter",
    "RecordingReporter",
    "EventBusError",
    "FailureKind",
    "ListenerFailure",
    "SynchronousListenerFailure",
    "DeferredListenerFailure",
    "NoRunningLoopError",
]
