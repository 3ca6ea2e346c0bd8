"""
Bootstrap component - blank mode template generation.
"""

from .component import COMMENT_HEADER, render_template, run, run_bootstrap, to_template
from .models import BootstrapModeInput, BootstrapModeOutput
from .ports import TemplateWriterPort

__all__ = [
    "run",
    "run_bootstrap",
    "render_template",
    "to_template",
    "BootstrapModeInput",
    "BootstrapModeOutput",
    "TemplateWriterPort",
    "COMMENT_HEADER",
]
