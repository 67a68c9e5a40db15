"""
Observable Core
=================
In-process event primitive: emit, listen, bubble.
"""

from observable_core.events import WILDCARD, EventBus

__all__ = ["WILDCARD", "EventBus"]
