"""
Inventory source adapters.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class FileInventorySource:
    """Loads ``_inventory.json`` from disk without blocking the event loop."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.loads = 0

    def _read(self) -> list[dict[str, Any]]:
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Inventory at {self.path} must be a JSON array")
        return data

    async def load(self) -> list[dict[str, Any]]:
        self.loads += 1
        logger.info("Loading inventory from %s", self.path)
        return await asyncio.to_thread(self._read)


class InMemoryInventorySource:
    """Serves an inventory already held in memory, e.g. straight after a build."""

    def __init__(self, entries: list[dict[str, Any]]) -> None:
        self._entries = entries
        self.loads = 0

    async def load(self) -> list[dict[str, Any]]:
        self.loads += 1
        # Yield once so concurrent callers observe a real suspension point.
        await asyncio.sleep(0)
        return list(self._entries)
