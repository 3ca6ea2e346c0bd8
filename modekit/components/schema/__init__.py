"""
Schema component - JSON Schema generation and mode document validation.
"""

from ._impl import FontTokenValue, TokenValue, build_mode_model, build_tokens_model
from .component import SCHEMA_DRAFT, build_schema, run, run_schema, run_validate
from .models import (
    BuildSchemaInput,
    BuildSchemaOutput,
    ValidateModeInput,
    ValidateModeOutput,
    ValidationError,
)

__all__ = [
    # Entry points
    "run",
    "run_schema",
    "run_validate",
    "build_schema",
    # Models
    "BuildSchemaInput",
    "BuildSchemaOutput",
    "ValidateModeInput",
    "ValidateModeOutput",
    "ValidationError",
    # Pydantic models
    "TokenValue",
    "FontTokenValue",
    "build_mode_model",
    "build_tokens_model",
    # Constants
    "SCHEMA_DRAFT",
]
