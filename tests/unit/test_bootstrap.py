"""
New-mode template derived from the schema.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from modekit.adapters.fs import FileSystemStore
from modekit.components.bootstrap import (
    COMMENT_HEADER,
    BootstrapModeInput,
    render_template,
    run_bootstrap,
    to_template,
)
from modekit.components.inventory import build_entry
from modekit.components.schema import build_schema

INTENTS = ("$color-bg", "$fontFamily-base")


class TestTemplate:
    def test_leaves_are_null(self) -> None:
        assert to_template({"a": {"type": "string"}}) == {"a": None}

    def test_no_properties(self) -> None:
        assert to_template(None) is None

    def test_schema_tree(self) -> None:
        template, _ = render_template(build_schema(INTENTS))

        assert template == {
            "mode": None,
            "tokens": {
                "$color-bg": {"$value": None},
                "$fontFamily-base": {"$value": None, "$fallback": None},
            },
        }

    def test_header_first_line(self) -> None:
        _, text = render_template(build_schema(INTENTS))

        assert text.splitlines()[0] == COMMENT_HEADER
        assert COMMENT_HEADER == "# yaml-language-server: $schema=./_schema.json"


class TestRunBootstrap:
    def test_writes_parseable_template(self, tmp_path: Path) -> None:
        fs = FileSystemStore(tmp_path)
        result = run_bootstrap(
            BootstrapModeInput(intents=INTENTS, target_path="modes/newmode.yml"), fs=fs
        )

        assert result.path == tmp_path / "modes" / "newmode.yml"
        assert yaml.safe_load(result.path.read_text(encoding="utf-8")) == result.template

    def test_overwrites(self, tmp_path: Path) -> None:
        fs = FileSystemStore(tmp_path)
        fs.write_text("modes/newmode.yml", "mode: old\n")

        run_bootstrap(BootstrapModeInput(intents=INTENTS, target_path="modes/newmode.yml"), fs=fs)

        assert "old" not in fs.read_text("modes/newmode.yml")

    def test_template_is_skipped_by_inventory(self, tmp_path: Path) -> None:
        fs = FileSystemStore(tmp_path)
        result = run_bootstrap(
            BootstrapModeInput(intents=INTENTS, target_path="modes/newmode.yml"), fs=fs
        )

        assert build_entry("newmode.yml", fs.read_yaml(result.path)) is None
