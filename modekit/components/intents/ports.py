"""
Intents component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class IntentsSourcePort(Protocol):
    """Port for reading the intents document."""

    def read_yaml(self, path: Path | str) -> Any:
        """Read and parse a YAML file."""
        ...
