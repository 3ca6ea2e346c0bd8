"""
Mode manager port definitions.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from .models import AnimationEndEvent, HeadTag

EventHandler = Callable[[AnimationEndEvent], Awaitable[Any]]


class InventorySourcePort(Protocol):
    """Port for loading the serialized inventory."""

    async def load(self) -> list[dict[str, Any]]:
        """Return the inventory entries as plain dictionaries."""
        ...


class ElementPort(Protocol):
    """Minimal view of a DOM element."""

    def get_attribute(self, name: str) -> str | None:
        """Get an attribute value, or None when absent."""
        ...


class DocumentPort(Protocol):
    """Port for the document the manager mutates in the interactive context."""

    def append_to_head(self, tag: HeadTag) -> None:
        """Append an element to the end of the head."""
        ...

    def insert_link(self, tag: HeadTag) -> None:
        """Insert a link after the manager's script, following earlier inserted links."""
        ...

    def add_event_listener(self, event_name: str, handler: EventHandler) -> None:
        """Register a handler for an event on the document root."""
        ...

    def remove_event_listener(self, event_name: str, handler: EventHandler) -> None:
        """Remove a previously registered handler."""
        ...
