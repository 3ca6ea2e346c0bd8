"""
Interop component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildInteropInput:
    """Input for building the interop SCSS file."""

    intents: tuple[str, ...]


@dataclass(frozen=True)
class BuildInteropOutput:
    """Output containing the ``_tokens.module.scss`` text."""

    text: str
