"""
Inventory component - per-mode CSS and the inventory manifest.
"""

from .component import (
    RESERVED_KEYS,
    YAML_EXTENSIONS,
    ModeFileError,
    build_entry,
    format_value,
    is_mode_file,
    run,
    run_inventory,
    to_css,
    to_declaration,
    to_declarations,
    to_href,
)
from .models import BuildInventoryInput, BuildInventoryOutput, Inventory, InventoryEntry
from .ports import ModeSourcePort

__all__ = [
    # Entry points
    "run",
    "run_inventory",
    "build_entry",
    # Rendering
    "to_css",
    "to_declaration",
    "to_declarations",
    "to_href",
    "format_value",
    "is_mode_file",
    # Models
    "BuildInventoryInput",
    "BuildInventoryOutput",
    "Inventory",
    "InventoryEntry",
    # Ports
    "ModeSourcePort",
    # Exceptions
    "ModeFileError",
    # Constants
    "RESERVED_KEYS",
    "YAML_EXTENSIONS",
]
