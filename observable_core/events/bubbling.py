"""
Observable Events — Bubbling
===============================
Forwards events emitted on a source bus into a target bus.

Built only on the public register()/emit() contract: the target
registers ordinary listeners on the source. No relationship object
exists, and bubbling cycles are not detected.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from observable_core.events.registry import WILDCARD


class Emitter(Protocol):
    def register(self, event_type: str, callback: Callable[..., Any], is_async: bool | None = None) -> int:
        ...  # pragma: no cover

    def emit(self, event_type: str, *args: Any, **kwargs: Any) -> Any:
        ...  # pragma: no cover


def make_forwarder(target: Emitter, event_type: str) -> Callable[..., None]:
    """
    Build the listener that re-emits event_type on target.

    The WILDCARD forwarder receives the real event type first and
    re-emits under that type, never as WILDCARD itself.
    """
    if event_type == WILDCARD:
        def forward_any(actual_type: str, *args: Any, **kwargs: Any) -> None:
            target.emit(actual_type, *args, **kwargs)
        return forward_any

    def forward(*args: Any, **kwargs: Any) -> None:
        target.emit(event_type, *args, **kwargs)
    return forward


def bubble(target: Emitter, source: Emitter, *event_types: str) -> list[tuple[str, int]]:
    """
    Re-emit each of event_types on target whenever source emits it.

    Returns:
        (event_type, index) pairs registered on source, usable with
        source.unregister() to stop forwarding.
    """
    registered = []
    for event_type in event_types:
        index = source.register(
            event_type, make_forwarder(target, event_type), is_async=False,
        )
        registered.append((event_type, index))
    return registered
