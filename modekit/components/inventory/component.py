"""
Inventory component - Render mode files into CSS and inventory entries.

For every YAML file in the modes directory:
- parse it and split ``mode``, ``tokens`` and the remaining metadata
- skip it when ``mode`` is absent (template files such as ``newmode.yml``)
- render one rule, ``[data-mode~="<mode>"] { <prop>:<value>; ... }``
- record ``href``, UTF-8 byte length and token coverage

Invariants:
- Entry order follows the sorted directory listing
- ``href`` is ``_<file stem>.css`` and unique within the inventory
- ``$fallback`` values never reach the CSS
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Any

from modekit.components.intents import to_var
from modekit.domain.diagnostics import BuildWarning, record_warning

from .models import BuildInventoryInput, BuildInventoryOutput, Inventory, InventoryEntry
from .ports import ModeSourcePort

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yml", ".yaml")

# Keys computed by the builder; metadata may not override them.
RESERVED_KEYS = frozenset({"href", "bytes", "coverage", "css"})


class ModeFileError(Exception):
    """Raised when a mode file is structurally malformed."""

    def __init__(self, source: str, errors: list[str]) -> None:
        self.source = source
        self.errors = errors
        super().__init__(f"Malformed mode file {source}: {'; '.join(errors)}")


# --- CSS Rendering ---


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _escape_attribute(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_declaration(intent: str, descriptor: Mapping[str, Any]) -> str:
    """``--🔒intent:value;``"""
    return f"{to_var(intent)}:{format_value(descriptor['$value'])};"


def to_declarations(tokens: Mapping[str, Mapping[str, Any]]) -> str:
    return " ".join(to_declaration(intent, descriptor) for intent, descriptor in tokens.items())


def to_css(mode: str, tokens: Mapping[str, Mapping[str, Any]]) -> str:
    """Render the rule block for one mode."""
    return f'[data-mode~="{_escape_attribute(mode)}"] {{ {to_declarations(tokens)} }}'


def to_href(file_name: str) -> str:
    return f"_{PurePath(file_name).stem}.css"


def is_mode_file(file_name: str) -> bool:
    return PurePath(file_name).suffix.lower() in YAML_EXTENSIONS


# --- Entry Construction ---


def _check_tokens(source: str, tokens: Any) -> dict[str, Mapping[str, Any]]:
    if tokens is None:
        raise ModeFileError(source, ["tokens is required"])
    if not isinstance(tokens, Mapping):
        raise ModeFileError(source, ["tokens must be a mapping"])

    errors: list[str] = []
    for intent, descriptor in tokens.items():
        if not isinstance(descriptor, Mapping) or descriptor.get("$value") is None:
            errors.append(f"token {intent} must be a mapping with a $value")
    if errors:
        raise ModeFileError(source, errors)
    return dict(tokens)


def build_entry(
    file_name: str,
    document: Any,
    *,
    intents: tuple[str, ...] | None = None,
    warnings: list[BuildWarning] | None = None,
) -> InventoryEntry | None:
    """
    Build the inventory entry for one parsed mode file.

    Returns None when the file has no ``mode`` alias.

    Raises:
        ModeFileError: if the document or its tokens are not mappings,
            or tokens are missing.
    """
    if warnings is None:
        warnings = []

    if document is None:
        document = {}
    if not isinstance(document, Mapping):
        raise ModeFileError(file_name, ["document must be a mapping"])

    metadata = dict(document)
    mode = metadata.pop("mode", None)
    raw_tokens = metadata.pop("tokens", None)

    if not mode:
        record_warning(warnings, logger, "missing_mode", "No mode alias, file skipped", file_name)
        return None
    if not isinstance(mode, str):
        raise ModeFileError(file_name, ["mode must be a string"])
    if any(char.isspace() for char in mode):
        record_warning(
            warnings,
            logger,
            "mode_whitespace",
            f"Mode '{mode}' contains whitespace; its selector can never match",
            file_name,
        )

    tokens = _check_tokens(file_name, raw_tokens)

    if intents is not None:
        known = set(intents)
        for intent in tokens:
            if intent not in known:
                record_warning(
                    warnings,
                    logger,
                    "unknown_intent",
                    f"Token {intent} is not a declared intent",
                    file_name,
                )

    for key in sorted(RESERVED_KEYS & metadata.keys()):
        record_warning(
            warnings,
            logger,
            "reserved_key",
            f"Metadata key '{key}' is computed, value ignored",
            file_name,
        )
        del metadata[key]

    css = to_css(mode, tokens)
    return InventoryEntry(
        mode=mode,
        href=to_href(file_name),
        byte_length=len(css.encode("utf-8")),
        coverage=tuple(tokens),
        css=css,
        metadata=metadata,
    )


# --- Component Entry Points ---


def run_inventory(inp: BuildInventoryInput, *, fs: ModeSourcePort) -> BuildInventoryOutput:
    """
    Build the inventory for every mode file in ``inp.modes_dir``.

    YAML syntax errors propagate from the parser and abort the build.
    Duplicate aliases or hrefs keep the first file and warn about the rest.

    Args:
        inp: Input with the modes directory and optional intents.
        fs: Port for listing and reading mode files.

    Returns:
        BuildInventoryOutput with the inventory and warnings.
    """
    modes_dir = Path(inp.modes_dir)
    warnings: list[BuildWarning] = []
    entries: list[InventoryEntry] = []
    modes_seen: dict[str, str] = {}
    hrefs_seen: dict[str, str] = {}

    for file_name in fs.list_dir(modes_dir):
        if not is_mode_file(file_name):
            continue

        document = fs.read_yaml(modes_dir / file_name)
        entry = build_entry(file_name, document, intents=inp.intents, warnings=warnings)
        if entry is None:
            continue

        if entry.mode in modes_seen:
            record_warning(
                warnings,
                logger,
                "duplicate_mode",
                f"Mode '{entry.mode}' already defined in {modes_seen[entry.mode]}, file skipped",
                file_name,
            )
            continue
        if entry.href in hrefs_seen:
            record_warning(
                warnings,
                logger,
                "duplicate_href",
                f"{entry.href} already generated from {hrefs_seen[entry.href]}, file skipped",
                file_name,
            )
            continue

        modes_seen[entry.mode] = file_name
        hrefs_seen[entry.href] = file_name
        entries.append(entry)

    logger.info("Inventory built: %d mode(s) from %s", len(entries), modes_dir)
    return BuildInventoryOutput(inventory=Inventory(entries=tuple(entries)), warnings=warnings)


run = run_inventory
