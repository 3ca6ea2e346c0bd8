"""
Pydantic models mirroring the generated JSON Schema.

The JSON Schema is what editors validate mode files against; these models
apply the same rules in-process so ``modekit check`` and the schema never
disagree.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, create_model

from modekit.components.intents import is_font_family

TokenScalar = StrictInt | StrictFloat | StrictStr


class TokenValue(BaseModel):
    """``{ $value }`` descriptor."""

    model_config = ConfigDict(extra="forbid")

    value: TokenScalar = Field(alias="$value")


class FontTokenValue(TokenValue):
    """``{ $value, $fallback }`` descriptor for font-family intents."""

    fallback: StrictStr = Field(alias="$fallback")


def build_tokens_model(intents: tuple[str, ...]) -> type[BaseModel]:
    """Build a model with one optional field per intent, aliased to the intent name."""
    fields: dict[str, Any] = {}
    for position, intent in enumerate(intents):
        value_type = FontTokenValue if is_font_family(intent) else TokenValue
        fields[f"intent_{position}"] = (value_type | None, Field(default=None, alias=intent))

    return create_model(
        "ModeTokens",
        __config__=ConfigDict(extra="forbid"),
        **fields,
    )


def build_mode_model(intents: tuple[str, ...]) -> type[BaseModel]:
    """Build the model for a whole mode document; extra metadata is allowed."""
    tokens_model = build_tokens_model(intents)
    return create_model(
        "ModeDocument",
        __config__=ConfigDict(extra="allow"),
        mode=(StrictStr, ...),
        tokens=(tokens_model, ...),
    )
