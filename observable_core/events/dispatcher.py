"""
Observable Events — Dispatcher
================================
Runs one dispatch pass for an emitted event.

Dispatch behavior:
1. Snapshot listeners for the event type and for WILDCARD
2. Invoke type listeners, then wildcard listeners, in registration order
3. Catch listener exceptions per listener
4. Report the failure
5. Continue to the next listener
6. Schedule deferred (awaitable) results without awaiting them

Wildcard listeners always receive the event type as first argument.

A listener failure must NOT:
- Stop the rest of the pass
- Escape emit()
- Fail the aggregate future

This module does NOT:
- Retry listeners
- Time out deferred work
- Detect bubbling cycles
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Optional

from observable_core.events.errors import (
    DeferredListenerFailure,
    ListenerFailure,
    NoRunningLoopError,
    SynchronousListenerFailure,
)
from observable_core.events.registry import WILDCARD, ListenerRegistry, Slot
from observable_core.events.reporting import FailureReporter

logger = logging.getLogger("observable.events")


def _report(
    reporter: FailureReporter,
    failure: ListenerFailure,
    log: logging.Logger = logger,
) -> None:
    try:
        reporter.report(failure.label, str(failure), failure.error)
    except Exception:
        log.exception(
            f"Failure reporter raised while reporting: {failure}"
        )


def _consume(future: "asyncio.Future[Any]") -> None:
    if not future.cancelled():
        future.exception()


def _close(awaitable: Any) -> None:
    # Avoids "coroutine was never awaited" for work that cannot be scheduled.
    if inspect.iscoroutine(awaitable):
        awaitable.close()


async def _guard(
    awaitable: Awaitable[Any],
    reporter: FailureReporter,
    label: str,
    event_type: str,
    index: int,
    wildcard: bool,
    log: logging.Logger,
) -> None:
    try:
        await awaitable
    except Exception as exc:
        _report(reporter, DeferredListenerFailure(
            label, event_type, index, exc, wildcard=wildcard,
        ), log)


class _Pass:
    """State of a single dispatch pass."""

    def __init__(
        self,
        event_type: str,
        label: str,
        reporter: FailureReporter,
        loop: Optional[asyncio.AbstractEventLoop],
        log: logging.Logger,
    ):
        self.event_type = event_type
        self.label = label
        self.reporter = reporter
        self.loop = loop
        self.log = log
        self.outstanding: list[asyncio.Task] = []
        self.invoked = 0
        self.failed = 0

    def fail(self, index: int, error: BaseException, wildcard: bool) -> None:
        self.failed += 1
        _report(self.reporter, SynchronousListenerFailure(
            self.label, self.event_type, index, error, wildcard=wildcard,
        ), self.log)

    def invoke(self, slot: Slot, args: tuple, kwargs: dict, wildcard: bool) -> None:
        if slot.is_async and self.loop is None:
            self.fail(slot.index, NoRunningLoopError(self.event_type), wildcard)
            return

        self.invoked += 1
        try:
            result = slot.callback(*args, **kwargs)
        except Exception as exc:
            self.fail(slot.index, exc, wildcard)
            return

        if not inspect.isawaitable(result):
            return

        if self.loop is None:
            _close(result)
            self.fail(slot.index, NoRunningLoopError(self.event_type), wildcard)
            return

        self.outstanding.append(self.loop.create_task(_guard(
            result, self.reporter, self.label,
            self.event_type, slot.index, wildcard, self.log,
        )))


def dispatch(
    event_type: str,
    args: tuple,
    kwargs: dict,
    registry: ListenerRegistry,
    label: str,
    reporter: FailureReporter,
    trace_logger: Optional[logging.Logger] = None,
    failure_logger: Optional[logging.Logger] = None,
) -> Optional["asyncio.Future[list[None]]"]:
    """
    Dispatch one event to every active listener in registry.

    Args:
        event_type:   Emitted event type.
        args, kwargs: Payload passed to each listener.
        registry:     Listeners of the emitting bus.
        label:        Name of the emitting bus, used in failure reports.
        reporter:     Receives every caught listener failure.
        trace_logger: When given, a DEBUG summary of the pass is logged.
        failure_logger: Where a raising reporter is logged.
                      Defaults to the "observable.events" logger.

    Returns:
        None when no listener produced deferred work, otherwise one
        future that completes once every deferred result has settled.

    This function NEVER raises listener exceptions.
    """
    # Both snapshots up front: listeners added during the pass wait for the next one.
    if event_type == WILDCARD:
        typed: tuple[Slot, ...] = ()
    else:
        typed = registry.snapshot(event_type)
    wildcards = registry.snapshot(WILDCARD)

    try:
        loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    state = _Pass(event_type, label, reporter, loop, failure_logger or logger)

    for slot in typed:
        if slot.active:
            state.invoke(slot, args, kwargs, wildcard=False)

    wildcard_args = (event_type,) + tuple(args)
    for slot in wildcards:
        if slot.active:
            state.invoke(slot, wildcard_args, kwargs, wildcard=True)

    if trace_logger is not None:
        trace_logger.debug(
            f"Dispatch complete: '{event_type}' from {label} — "
            f"{state.invoked} invoked, {state.failed} failed, "
            f"{len(state.outstanding)} deferred"
        )

    if not state.outstanding:
        return None
    aggregate = asyncio.gather(*state.outstanding)
    # A discarded aggregate must not log "exception was never retrieved".
    aggregate.add_done_callback(_consume)
    return aggregate
