"""
Build component - Generate and write every artifact.

Writes, each as a single whole-file write:
- ``_schema.json`` for mode files
- ``_tokens.module.scss`` interop file
- one ``_<name>.css`` per inventory entry
- ``_inventory.json`` (CSS text omitted)
- the mode observer client bundle

There are no retries and no rollback: the first failing write raises and
aborts the build, leaving earlier artifacts as written.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from modekit.components.interop import BuildInteropInput, run_interop
from modekit.components.intents import LoadIntentsInput, run_load
from modekit.components.inventory import BuildInventoryInput, run_inventory
from modekit.components.mode_manager import CLIENT_BUNDLE_NAME, load_client_bundle
from modekit.components.schema import BuildSchemaInput, run_schema

from .models import BuildInput, BuildOutput
from .ports import BuildFileSystemPort

logger = logging.getLogger(__name__)


def to_pretty_json(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def run_build(inp: BuildInput, *, fs: BuildFileSystemPort) -> BuildOutput:
    """
    Run a full build.

    Args:
        inp: Source and target paths.
        fs: File system port for reads and writes.

    Returns:
        BuildOutput listing written files and skip warnings.

    Raises:
        IntentsValidationError: if the intents list is malformed.
        ModeFileError: if a mode file is structurally malformed.
        yaml.YAMLError: if any source is not valid YAML.
        OSError: if a write fails.
    """
    intents = run_load(LoadIntentsInput(intents_path=inp.intents_path), fs=fs).intents
    written: list[Path] = []

    schema = run_schema(BuildSchemaInput(intents=intents)).schema
    written.append(fs.write_text(inp.schema_path, to_pretty_json(schema)))

    interop = run_interop(BuildInteropInput(intents=intents)).text
    written.append(fs.write_text(inp.tokens_scss_path, interop))

    result = run_inventory(BuildInventoryInput(modes_dir=inp.modes_dir, intents=intents), fs=fs)
    inventory = result.inventory

    for href, css in inventory.stylesheets():
        written.append(fs.write_text(Path(inp.public_dir) / href, css))

    written.append(fs.write_text(inp.inventory_path, inventory.to_json()))

    if inp.write_client_bundle:
        bundle_path = Path(inp.public_dir) / CLIENT_BUNDLE_NAME
        written.append(fs.write_text(bundle_path, load_client_bundle()))

    logger.info(
        "Build complete: %d intent(s), %d mode(s), %d file(s), %d warning(s)",
        len(intents),
        len(inventory),
        len(written),
        len(result.warnings),
    )
    return BuildOutput(written=written, inventory=inventory, warnings=list(result.warnings))


run = run_build
