"""
Bootstrap component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class BootstrapModeInput:
    """Input for writing a blank mode template."""

    intents: tuple[str, ...]
    target_path: Path | str


@dataclass(frozen=True)
class BootstrapModeOutput:
    """Output describing the written template."""

    path: Path
    template: dict[str, Any]
    text: str
