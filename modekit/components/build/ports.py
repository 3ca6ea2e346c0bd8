"""
Build component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class BuildFileSystemPort(Protocol):
    """Port for reading sources and writing artifacts."""

    def read_yaml(self, path: Path | str) -> Any:
        """Read and parse a YAML file."""
        ...

    def list_dir(self, path: Path | str) -> list[str]:
        """List file names in a directory, in a stable order."""
        ...

    def write_text(self, path: Path | str, content: str) -> Path:
        """Write the whole content in one call and return the target path."""
        ...
