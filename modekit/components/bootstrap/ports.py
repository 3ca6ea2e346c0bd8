"""
Bootstrap component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TemplateWriterPort(Protocol):
    """Port for writing the template file."""

    def write_text(self, path: Path | str, content: str) -> Path:
        """Write the whole content and return the target path."""
        ...
