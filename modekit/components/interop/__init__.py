"""
Interop component - SCSS variables and CSS Modules exports for intents.
"""

from .component import (
    build_interop,
    run,
    run_interop,
    to_interpolated,
    to_list,
    to_module_exports,
    to_scss_var,
)
from .models import BuildInteropInput, BuildInteropOutput

__all__ = [
    "run",
    "run_interop",
    "build_interop",
    "to_list",
    "to_scss_var",
    "to_interpolated",
    "to_module_exports",
    "BuildInteropInput",
    "BuildInteropOutput",
]
