"""
Build component - orchestrates schema, interop and inventory and writes the artifacts.
"""

from .component import run, run_build, to_pretty_json
from .models import BuildInput, BuildOutput
from .ports import BuildFileSystemPort

__all__ = [
    "run",
    "run_build",
    "to_pretty_json",
    "BuildInput",
    "BuildOutput",
    "BuildFileSystemPort",
]
