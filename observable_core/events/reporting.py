"""
Observable Events — Failure Reporting
========================================
The logging sink told about listener failures.

The dispatcher calls report() exactly once per failure it catches.
Reporters must not influence dispatch; a reporter that raises is
logged and ignored.
"""

from __future__ import annotations

import logging
from typing import Protocol


class FailureReporter(Protocol):
    """Sink for uncaught listener failures."""

    def report(self, label: str, message: str, error: BaseException) -> None:
        """Record one listener failure for the component named by label."""
        ...  # pragma: no cover


class LoggingReporter:
    """Default reporter — writes failures to the standard logging module."""

    def __init__(self, logger_name: str = "observable.events") -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def report(self, label: str, message: str, error: BaseException) -> None:
        self._logger.error("[%s] %s", label, message, exc_info=error)


class RecordingReporter:
    """
    In-memory reporter for tests and diagnostics.

    Keeps every (label, message, error) triple in arrival order.
    """

    def __init__(self) -> None:
        self.records: list[tuple[str, str, BaseException]] = []

    def report(self, label: str, message: str, error: BaseException) -> None:
        self.records.append((label, message, error))

    @property
    def errors(self) -> list[BaseException]:
        return [error for _, _, error in self.records]

    def clear(self) -> None:
        self.records.clear()
