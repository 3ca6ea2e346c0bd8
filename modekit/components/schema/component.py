"""
Schema component - JSON Schema for mode files.

Derives a draft-07 schema from the intents list. A mode file is valid only
if every token key is a declared intent, each ``$value`` is a number or a
string, and font-family intents also carry a string ``$fallback``. No range
or enum checks are made.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from modekit.components.intents import is_font_family

from ._impl import build_mode_model
from .models import (
    BuildSchemaInput,
    BuildSchemaOutput,
    ValidateModeInput,
    ValidateModeOutput,
    ValidationError,
)

SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"


def _value_properties(intent: str) -> dict[str, Any]:
    properties: dict[str, Any] = {"$value": {"type": ["number", "string"]}}
    if is_font_family(intent):
        properties["$fallback"] = {"type": ["string"]}
    return properties


def _intent_node(intent: str) -> dict[str, Any]:
    required = ["$value", "$fallback"] if is_font_family(intent) else ["$value"]
    return {
        "type": "object",
        "additionalProperties": False,
        "required": required,
        "properties": _value_properties(intent),
    }


def build_schema(intents: tuple[str, ...] | list[str]) -> dict[str, Any]:
    """Pure schema construction."""
    return {
        "$schema": SCHEMA_DRAFT,
        "type": "object",
        "required": ["mode", "tokens"],
        "properties": {
            "mode": {"type": "string"},
            "tokens": {
                "type": "object",
                "additionalProperties": False,
                "properties": {intent: _intent_node(intent) for intent in intents},
            },
        },
    }


def _parse_pydantic_errors(exc: PydanticValidationError) -> list[ValidationError]:
    """Flatten pydantic errors into field-level records."""
    errors: list[ValidationError] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        error_type = error.get("type", "unknown")
        code = "invalid_value"
        if "missing" in error_type:
            code = "required"
        elif "extra_forbidden" in error_type:
            code = "unknown_field"
        elif "type" in error_type:
            code = "invalid_type"

        msg = error.get("msg", "Invalid value")
        errors.append(ValidationError(field=field, code=code, message=f"Field '{field}': {msg}"))
    return errors


# --- Component Entry Points ---


def run_schema(inp: BuildSchemaInput) -> BuildSchemaOutput:
    """
    Build the JSON Schema for mode files.

    Args:
        inp: Input containing the ordered intents.

    Returns:
        BuildSchemaOutput with the schema document.
    """
    return BuildSchemaOutput(schema=build_schema(inp.intents))


def run_validate(inp: ValidateModeInput) -> ValidateModeOutput:
    """
    Validate a parsed mode document against the rules the schema encodes.

    Args:
        inp: Input containing intents, the parsed document and its source name.

    Returns:
        ValidateModeOutput with field-level errors (empty if valid).
    """
    if not isinstance(inp.document, dict):
        error = ValidationError(
            field="_schema",
            code="invalid_type",
            message="Mode document must be a mapping",
        )
        return ValidateModeOutput(source=inp.source, errors=[error], is_valid=False)

    model = build_mode_model(inp.intents)
    try:
        model.model_validate(inp.document)
    except PydanticValidationError as e:
        errors = _parse_pydantic_errors(e)
        return ValidateModeOutput(source=inp.source, errors=errors, is_valid=False)

    return ValidateModeOutput(source=inp.source)


def run(inp: BuildSchemaInput | ValidateModeInput) -> BuildSchemaOutput | ValidateModeOutput:
    """Dispatch on input type."""
    if isinstance(inp, BuildSchemaInput):
        return run_schema(inp)
    elif isinstance(inp, ValidateModeInput):
        return run_validate(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
