"""
Bootstrap component - Blank mode template derived from the schema.

Walks the schema's ``properties`` tree and turns every property into a key
whose value is the template of its own properties, or null at the leaves.
The YAML carries a language-server header so editors validate it against
``_schema.json``. Its ``mode`` is null, so the inventory skips it until an
author fills it in.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from modekit.components.schema import build_schema

from .models import BootstrapModeInput, BootstrapModeOutput
from .ports import TemplateWriterPort

logger = logging.getLogger(__name__)

# Used by YAML validators to refer to the schema.
COMMENT_HEADER = "# yaml-language-server: $schema=./_schema.json"


def to_template(properties: dict[str, Any] | None) -> dict[str, Any] | None:
    """Recursively build template nodes from schema properties."""
    if properties is None:
        return None
    return {name: to_template(node.get("properties")) for name, node in properties.items()}


def render_template(schema: dict[str, Any]) -> tuple[dict[str, Any], str]:
    template = to_template(schema.get("properties")) or {}
    body = yaml.dump(template, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return template, "\n".join([COMMENT_HEADER, body])


def run_bootstrap(inp: BootstrapModeInput, *, fs: TemplateWriterPort) -> BootstrapModeOutput:
    """
    Write a blank mode template for the current intents.

    An existing file at the target is overwritten.

    Args:
        inp: Input containing intents and the target path.
        fs: Port used to write the template.

    Returns:
        BootstrapModeOutput with the template data and written text.
    """
    template, text = render_template(build_schema(inp.intents))
    path = fs.write_text(inp.target_path, text)
    logger.info("Mode template written to %s", path)
    return BootstrapModeOutput(path=path, template=template, text=text)


run = run_bootstrap
