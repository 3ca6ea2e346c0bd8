"""
Inventory component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class ModeSourcePort(Protocol):
    """Port for reading mode definition files."""

    def list_dir(self, path: Path | str) -> list[str]:
        """List file names in a directory, in a stable order."""
        ...

    def read_yaml(self, path: Path | str) -> Any:
        """Read and parse a YAML file."""
        ...
