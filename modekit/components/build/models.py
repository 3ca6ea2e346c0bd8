"""
Build component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from modekit.components.inventory import Inventory
from modekit.domain.diagnostics import BuildWarning


@dataclass(frozen=True)
class BuildInput:
    """Source and target locations for one build."""

    intents_path: Path
    modes_dir: Path
    schema_path: Path
    tokens_scss_path: Path
    public_dir: Path
    inventory_path: Path
    write_client_bundle: bool = True


@dataclass(frozen=True)
class BuildOutput:
    """Result of a completed build."""

    written: list[Path]
    inventory: Inventory
    warnings: list[BuildWarning] = field(default_factory=list)
    success: bool = True
