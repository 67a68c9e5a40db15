"""
Observable Config — Public API
=================================
Settings consumed by EventBus instances.
"""

from observable_core.config.settings import (
    EventBusSettings,
    get_default_settings,
    set_default_settings,
)

__all__ = [
    "EventBusSettings",
    "get_default_settings",
    "set_default_settings",
]
