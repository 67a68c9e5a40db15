"""
Observable Events — Listener Registry
========================================
Owns the per-bus mapping from event type to an ordered list of slots.

Rules:
- Slot index = position in that type's list, starting at 0
- Indices are never reused; removal tombstones the slot
- Iteration order = registration order
- Unknown type / bad index on removal is a silent no-op
- In-memory only, one registry per bus, no locking
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

WILDCARD = "*"

# Returned by register() when the event type cannot be used as a key.
NO_SLOT = -1

Listener = Callable[..., Any]


@dataclass(eq=False)
class Slot:
    """One registered listener and its stable removal index."""

    index: int
    callback: Listener
    is_async: bool = False
    active: bool = True


def _callback_name(callback: Any) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class ListenerRegistry:
    """
    In-memory registry of listeners, keyed by event type.

    WILDCARD is stored like any other type; the dispatcher gives
    it its meaning.
    """

    def __init__(self, logger_name: str = "observable.events"):
        self._slots: dict[str, list[Slot]] = {}
        self._logger = logging.getLogger(logger_name)

    def _slots_for(self, event_type: Any) -> list[Slot]:
        try:
            return self._slots.get(event_type, [])
        except TypeError:  # unhashable event type
            return []

    def register(
        self,
        event_type: str,
        callback: Listener,
        is_async: Optional[bool] = None,
    ) -> int:
        """
        Append a listener for event_type and return its slot index.

        Args:
            event_type: Event type key (WILDCARD for every type).
            callback:   Callable invoked on dispatch.
            is_async:   Capability tag. None derives it from the callback:
                        coroutine functions are async, everything else sync.

        Never raises. A non-callable is accepted and fails at dispatch,
        where the failure is reported like any other. An event type that
        cannot be a dict key is refused with NO_SLOT.
        """
        if is_async is None:
            is_async = inspect.iscoroutinefunction(callback)

        try:
            slots = self._slots.setdefault(event_type, [])
        except TypeError:
            self._logger.warning(
                f"Listener not registered: event type {event_type!r} is unhashable"
            )
            return NO_SLOT
        index = len(slots)
        slots.append(Slot(index=index, callback=callback, is_async=bool(is_async)))

        self._logger.debug(
            f"Listener registered: {_callback_name(callback)} → "
            f"'{event_type}' #{index}"
        )
        return index

    def unregister(self, event_type: str, index: int) -> None:
        """Tombstone the slot at index. Anything invalid is ignored."""
        slots = self._slots_for(event_type)
        if not slots or not isinstance(index, int) or isinstance(index, bool):
            return
        if index < 0 or index >= len(slots):
            return

        slot = slots[index]
        if not slot.active:
            return
        slot.active = False

        self._logger.debug(f"Listener removed: '{event_type}' #{index}")

    def snapshot(self, event_type: str) -> tuple[Slot, ...]:
        """
        Ordered slots (active and tombstoned) for event_type.
        Returns an empty tuple for unknown types.
        """
        return tuple(self._slots_for(event_type))

    def has_listeners(self, event_type: str) -> bool:
        """Check if any active listener exists for event_type."""
        return any(slot.active for slot in self._slots_for(event_type))

    def listener_count(self, event_type: str) -> int:
        """Count active listeners for event_type."""
        return sum(1 for slot in self._slots_for(event_type) if slot.active)

    def event_types(self) -> frozenset[str]:
        """Return all event types with at least one active listener."""
        return frozenset(
            event_type
            for event_type, slots in self._slots.items()
            if any(slot.active for slot in slots)
        )

    def clear(self) -> None:
        """Tombstone every slot. Issued indices stay retired."""
        for slots in self._slots.values():
            for slot in slots:
                slot.active = False
        self._logger.debug("All listeners removed")
