"""
Inventory component input/output models.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from modekit.domain.diagnostics import BuildWarning


@dataclass(frozen=True)
class InventoryEntry:
    """
    One generated mode.

    ``css`` is kept in memory to size the entry and to write the per-mode
    stylesheet; it is never part of the serialized inventory.
    """

    mode: str
    href: str
    byte_length: int
    coverage: tuple[str, ...]
    css: str = field(repr=False)
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialized view: ``{mode, href, bytes, coverage, ...metadata}``."""
        return {
            "mode": self.mode,
            "href": self.href,
            "bytes": self.byte_length,
            "coverage": list(self.coverage),
            **self.metadata,
        }


@dataclass(frozen=True)
class Inventory:
    """Ordered collection of inventory entries."""

    entries: tuple[InventoryEntry, ...] = ()

    def __iter__(self) -> Iterator[InventoryEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, mode: str) -> InventoryEntry | None:
        for entry in self.entries:
            if entry.mode == mode:
                return entry
        return None

    def stylesheets(self) -> list[tuple[str, str]]:
        """File view: ``(href, css)`` pairs to write."""
        return [(entry.href, entry.css) for entry in self.entries]

    def to_list(self) -> list[dict[str, Any]]:
        return [entry.to_dict() for entry in self.entries]

    def to_json(self, indent: int = 2) -> str:
        """Serialized view, without CSS text."""
        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class BuildInventoryInput:
    """Input for building the inventory from a modes directory."""

    modes_dir: Path | str
    # When given, tokens outside this list are reported as warnings.
    intents: tuple[str, ...] | None = None


@dataclass(frozen=True)
class BuildInventoryOutput:
    """Output containing the inventory and any skip diagnostics."""

    inventory: Inventory
    warnings: list[BuildWarning] = field(default_factory=list)
