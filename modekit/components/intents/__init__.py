"""
Intents component - intent loading and the intent to custom-property mapping.
"""

from .component import (
    FONT_FAMILY_MARKER,
    INTENT_PREFIX,
    VAR_MARKER,
    IntentsValidationError,
    from_var,
    is_font_family,
    run,
    run_load,
    to_css_var,
    to_var,
    validate_intents,
)
from .models import LoadIntentsInput, LoadIntentsOutput
from .ports import IntentsSourcePort

__all__ = [
    # Entry points
    "run",
    "run_load",
    # Mapping
    "to_var",
    "from_var",
    "to_css_var",
    "is_font_family",
    "validate_intents",
    # Models
    "LoadIntentsInput",
    "LoadIntentsOutput",
    # Ports
    "IntentsSourcePort",
    # Exceptions
    "IntentsValidationError",
    # Constants
    "INTENT_PREFIX",
    "VAR_MARKER",
    "FONT_FAMILY_MARKER",
]
