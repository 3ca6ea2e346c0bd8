"""
Intents component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LoadIntentsInput:
    """Input for loading the intents list."""

    intents_path: Path | str


@dataclass(frozen=True)
class LoadIntentsOutput:
    """Output from loading the intents list."""

    intents: tuple[str, ...]
    errors: list[str] = field(default_factory=list)
    success: bool = True
