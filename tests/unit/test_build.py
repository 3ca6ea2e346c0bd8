"""
Full build: every artifact written once, in order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from modekit.adapters.fs import FileSystemStore
from modekit.app_shell.config import Settings
from modekit.components.build import BuildInput, run_build
from modekit.components.intents import IntentsValidationError
from modekit.components.mode_manager import CLIENT_BUNDLE_NAME, load_client_bundle


def build_input(settings: Settings, **overrides: Any) -> BuildInput:
    values: dict[str, Any] = {
        "intents_path": settings.intents_path,
        "modes_dir": settings.modes_dir,
        "schema_path": settings.schema_path,
        "tokens_scss_path": settings.tokens_scss_path,
        "public_dir": settings.public_dir,
        "inventory_path": settings.inventory_path,
    }
    values.update(overrides)
    return BuildInput(**values)


class RecordingStore(FileSystemStore):
    """Filesystem store that records every write."""

    def __init__(self, base_path: Path, fail_on: str | None = None) -> None:
        super().__init__(base_path)
        self.writes: list[Path] = []
        self.fail_on = fail_on

    def write_text(self, path: str | Path, content: str) -> Path:
        if self.fail_on and Path(path).name == self.fail_on:
            raise OSError(f"disk full: {path}")
        target = super().write_text(path, content)
        self.writes.append(target)
        return target


class TestRunBuild:
    def test_writes_all_artifacts(self, project: Settings, fs: FileSystemStore) -> None:
        result = run_build(build_input(project), fs=fs)

        assert result.success
        assert result.written == [
            project.schema_path,
            project.tokens_scss_path,
            project.public_dir / "_dark.css",
            project.inventory_path,
            project.public_dir / CLIENT_BUNDLE_NAME,
        ]
        for path in result.written:
            assert path.is_file()

    def test_schema_is_pretty_json(self, project: Settings, fs: FileSystemStore) -> None:
        run_build(build_input(project), fs=fs)
        text = project.schema_path.read_text(encoding="utf-8")

        assert text.startswith('{\n  "$schema"')
        assert json.loads(text)["required"] == ["mode", "tokens"]

    def test_css_and_inventory(self, project: Settings, fs: FileSystemStore) -> None:
        run_build(build_input(project), fs=fs)
        css = (project.public_dir / "_dark.css").read_text(encoding="utf-8")
        inventory = json.loads(project.inventory_path.read_text(encoding="utf-8"))

        assert css == '[data-mode~="dark"] { --🔒color-bg:#000; --🔒fontFamily-base:Arial; }'
        assert inventory == [
            {
                "mode": "dark",
                "href": "_dark.css",
                "bytes": len(css.encode("utf-8")),
                "coverage": ["$color-bg", "$fontFamily-base"],
            }
        ]

    def test_interop_written(self, project: Settings, fs: FileSystemStore) -> None:
        run_build(build_input(project), fs=fs)
        text = project.tokens_scss_path.read_text(encoding="utf-8")

        assert text.splitlines()[0] == "$color-bg: var(--🔒color-bg);"

    def test_bundle_copied(self, project: Settings, fs: FileSystemStore) -> None:
        run_build(build_input(project), fs=fs)

        bundle = (project.public_dir / CLIENT_BUNDLE_NAME).read_text(encoding="utf-8")
        assert bundle == load_client_bundle()

    def test_bundle_optional(self, project: Settings, fs: FileSystemStore) -> None:
        result = run_build(build_input(project, write_client_bundle=False), fs=fs)

        assert not (project.public_dir / CLIENT_BUNDLE_NAME).exists()
        assert project.public_dir / CLIENT_BUNDLE_NAME not in result.written

    def test_one_write_per_artifact(self, project: Settings) -> None:
        store = RecordingStore(project.root)
        run_build(build_input(project), fs=store)

        assert len(store.writes) == len(set(store.writes)) == 5

    def test_write_failure_aborts(self, project: Settings) -> None:
        store = RecordingStore(project.root, fail_on="_dark.css")

        with pytest.raises(OSError):
            run_build(build_input(project), fs=store)

        # Earlier artifacts stay written; later ones are never attempted.
        assert project.schema_path.exists()
        assert not project.inventory_path.exists()

    def test_skip_warnings_returned(self, project: Settings, fs: FileSystemStore) -> None:
        fs.write_text(project.modes_dir / "newmode.yml", "mode:\ntokens:\n")

        result = run_build(build_input(project), fs=fs)

        assert len(result.inventory) == 1
        assert [w.code for w in result.warnings] == ["missing_mode"]

    def test_invalid_intents(self, project: Settings, fs: FileSystemStore) -> None:
        fs.write_text(project.intents_path, "- color-bg\n")

        with pytest.raises(IntentsValidationError):
            run_build(build_input(project), fs=fs)
        assert not project.schema_path.exists()

    def test_sample_project(self, sample_project: Settings) -> None:
        fs = FileSystemStore(sample_project.root)
        result = run_build(build_input(sample_project), fs=fs)

        assert [entry.mode for entry in result.inventory] == ["code", "dark", "light"]
        assert result.warnings == []
