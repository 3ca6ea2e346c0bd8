"""
Intents component - Load intent names and map them to CSS custom properties.

An intent is a design-token name carrying the reserved ``$`` prefix, e.g.
``$color-bg``. Every generated artifact (schema, interop SCSS, per-mode CSS)
keys on intents, and the SCSS and CSS outputs must agree on the custom
property each intent maps to. ``to_var`` is the single place that mapping
lives.

Invariants:
- Intents are unique and carry the ``$`` prefix
- ``from_var(to_var(intent)) == intent`` for every valid intent
"""

from __future__ import annotations

from typing import Any

from .models import LoadIntentsInput, LoadIntentsOutput
from .ports import IntentsSourcePort

INTENT_PREFIX = "$"

# Private-use marker keeping generated properties apart from hand-written ones.
VAR_MARKER = "--🔒"

FONT_FAMILY_MARKER = "fontFamily"


class IntentsValidationError(Exception):
    """Raised when the intents document is not a list of unique intents."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Intents validation failed: {'; '.join(errors)}")


def to_var(intent: str) -> str:
    """
    Convert a $-prefixed intent into its CSS custom property name.

    Example:
        >>> to_var("$color-bg")
        '--🔒color-bg'
    """
    return intent.replace(INTENT_PREFIX, VAR_MARKER, 1)


def from_var(prop: str) -> str:
    """Inverse of ``to_var``."""
    if not prop.startswith(VAR_MARKER):
        raise ValueError(f"Not a generated custom property: {prop}")
    return INTENT_PREFIX + prop[len(VAR_MARKER) :]


def to_css_var(intent: str) -> str:
    """Wrap the custom property in ``var()``, e.g. ``var(--🔒color-bg)``."""
    return f"var({to_var(intent)})"


def is_font_family(intent: str) -> bool:
    """Font-family intents must declare a ``$fallback``."""
    return FONT_FAMILY_MARKER in intent


def validate_intents(data: Any) -> list[str]:
    """Pure validation of a parsed intents document."""
    if not isinstance(data, list):
        return [f"Intents must be a list, got {type(data).__name__}"]

    errors: list[str] = []
    seen: set[str] = set()
    for position, intent in enumerate(data):
        if not isinstance(intent, str):
            errors.append(f"Intent at position {position} must be a string")
            continue
        if not intent.startswith(INTENT_PREFIX) or len(intent) == 1:
            errors.append(f"Intent '{intent}' must start with '{INTENT_PREFIX}'")
        if intent in seen:
            errors.append(f"Duplicate intent: {intent}")
        seen.add(intent)
    return errors


def run_load(inp: LoadIntentsInput, *, fs: IntentsSourcePort) -> LoadIntentsOutput:
    """
    Load the intents list.

    YAML syntax errors propagate from the parser.

    Raises:
        IntentsValidationError: if the document is not a list of unique intents.
    """
    data = fs.read_yaml(inp.intents_path)
    errors = validate_intents(data)
    if errors:
        raise IntentsValidationError(errors)
    return LoadIntentsOutput(intents=tuple(data))


run = run_load
