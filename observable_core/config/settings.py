"""
Observable Config — Event Bus Settings
=========================================
Runtime knobs for EventBus instances: the logger every bus log
line goes to (failure reports, registration, reporter errors),
the label for an unnamed bus, and DEBUG tracing of dispatch.

A bus reads the default settings once, at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


# ══════════════════════════════════════════════════════════════
# SETTINGS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class EventBusSettings:
    """Immutable configuration shared by EventBus instances."""

    logger_name: str = "observable.events"
    fallback_label: str = "EventBus"  # used when no label can be resolved
    trace_dispatch: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.logger_name, str) or not self.logger_name.strip():
            raise ValueError("logger_name must be a non-empty string.")
        if not isinstance(self.fallback_label, str) or not self.fallback_label.strip():
            raise ValueError("fallback_label must be a non-empty string.")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "EventBusSettings":
        """Build settings from a plain mapping. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in mapping.items() if k in known}
        if "trace_dispatch" in values:
            values["trace_dispatch"] = bool(values["trace_dispatch"])
        return cls(**values)


# ══════════════════════════════════════════════════════════════
# DEFAULT SETTINGS
# ══════════════════════════════════════════════════════════════

_default_settings = EventBusSettings()


def set_default_settings(settings: EventBusSettings) -> None:
    """Override the settings picked up by newly created buses."""
    global _default_settings
    if not isinstance(settings, EventBusSettings):
        raise TypeError(
            f"Expected EventBusSettings, got {type(settings).__name__}."
        )
    _default_settings = settings


def get_default_settings() -> EventBusSettings:
    """Get the current default settings."""
    return _default_settings
