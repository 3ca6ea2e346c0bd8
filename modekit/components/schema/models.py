"""
Schema component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Field-level validation error for a mode document."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class BuildSchemaInput:
    """Input for building the mode schema."""

    intents: tuple[str, ...]


@dataclass(frozen=True)
class BuildSchemaOutput:
    """Output containing the JSON Schema document."""

    schema: dict[str, Any]


@dataclass(frozen=True)
class ValidateModeInput:
    """Input for validating one parsed mode document."""

    intents: tuple[str, ...]
    document: Any
    source: str = "<mode>"


@dataclass(frozen=True)
class ValidateModeOutput:
    """Output from validating a mode document."""

    source: str
    errors: list[ValidationError] = field(default_factory=list)
    is_valid: bool = True
