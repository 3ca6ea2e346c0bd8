"""
Inventory source and document adapters for the mode manager.
"""

from __future__ import annotations

from .document import InMemoryDocument, InMemoryElement
from .inventory import FileInventorySource, InMemoryInventorySource

__all__ = [
    "FileInventorySource",
    "InMemoryInventorySource",
    "InMemoryDocument",
    "InMemoryElement",
]
