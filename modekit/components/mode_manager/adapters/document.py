"""
In-memory document adapter.

Models the parts of a DOM the manager touches: the head's child list, the
manager's script position and root event listeners.
"""

from __future__ import annotations

from typing import Any

from ..models import AnimationEndEvent, HeadTag, TagKind
from ..ports import EventHandler


class InMemoryElement:
    """Element with attributes only."""

    def __init__(self, **attributes: str) -> None:
        self.attributes = {name.replace("_", "-"): value for name, value in attributes.items()}

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


class InMemoryDocument:
    """Head child list plus event listeners."""

    def __init__(self) -> None:
        self.head: list[HeadTag] = []
        self.listeners: dict[str, list[EventHandler]] = {}
        self._cursor: int | None = None

    def append_to_head(self, tag: HeadTag) -> None:
        self.head.append(tag)
        if tag.kind is TagKind.SCRIPT:
            self._cursor = len(self.head)

    def insert_link(self, tag: HeadTag) -> None:
        if self._cursor is None:
            self.head.append(tag)
            return
        self.head.insert(self._cursor, tag)
        self._cursor += 1

    def add_event_listener(self, event_name: str, handler: EventHandler) -> None:
        self.listeners.setdefault(event_name, []).append(handler)

    def remove_event_listener(self, event_name: str, handler: EventHandler) -> None:
        handlers = self.listeners.get(event_name, [])
        if handler in handlers:
            handlers.remove(handler)

    async def dispatch(self, event_name: str, event: AnimationEndEvent) -> list[Any]:
        """Deliver an event to every registered handler, in registration order."""
        return [await handler(event) for handler in list(self.listeners.get(event_name, []))]

    def links(self) -> list[HeadTag]:
        return [tag for tag in self.head if tag.kind is TagKind.LINK]
