"""
Interop component - SCSS / CSS Modules bridge for intents.

Emits one SCSS variable per intent bound to its generated custom property,
followed by a CSS Modules ``:export`` block so JS can import the names:

    $color-bg: var(--🔒color-bg);
    :export { #{'$color-bg'}: $color-bg; }
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from modekit.components.intents import to_css_var

from .models import BuildInteropInput, BuildInteropOutput


def to_list(items: Iterable[str], fn: Callable[[str], str]) -> str:
    """Map each item to a line and join them."""
    return "\n".join(fn(item) for item in items)


def to_scss_var(intent: str) -> str:
    """``$intent: var(--🔒intent);``"""
    return f"{intent}: {to_css_var(intent)};"


def to_interpolated(intent: str) -> str:
    """``#{'$intent'}: $intent;``"""
    return f"#{{'{intent}'}}: {intent};"


def to_module_exports(intents: Iterable[str]) -> str:
    return f":export {{ {to_list(intents, to_interpolated)} }}"


def build_interop(intents: tuple[str, ...] | list[str]) -> str:
    return "\n".join([to_list(intents, to_scss_var), to_module_exports(intents)])


def run_interop(inp: BuildInteropInput) -> BuildInteropOutput:
    """
    Build the ``_tokens.module.scss`` text.

    Args:
        inp: Input containing the ordered intents.

    Returns:
        BuildInteropOutput with the SCSS text.
    """
    return BuildInteropOutput(text=build_interop(inp.intents))


run = run_interop
