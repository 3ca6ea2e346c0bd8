import shutil
from pathlib import Path

import pytest
import yaml

from modekit.adapters.fs import FileSystemStore
from modekit.app_shell.config import Settings

PROJECT_ROOT = Path(__file__).parent.parent
SAMPLE_DIR = PROJECT_ROOT / "sample"

INTENTS = ("$color-bg", "$fontFamily-base")

DARK_MODE = {
    "mode": "dark",
    "tokens": {
        "$color-bg": {"$value": "#000"},
        "$fontFamily-base": {"$value": "Arial", "$fallback": "sans-serif"},
    },
}


def write_yaml(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    return path


@pytest.fixture
def intents() -> tuple[str, ...]:
    return INTENTS


@pytest.fixture
def project(tmp_path: Path) -> Settings:
    """
    Creates a minimal project: two intents and a single dark mode.
    """
    settings = Settings(root=tmp_path)
    write_yaml(settings.intents_path, list(INTENTS))
    write_yaml(settings.modes_dir / "dark.yml", DARK_MODE)
    return settings


@pytest.fixture
def sample_project(tmp_path: Path) -> Settings:
    """Copy of the repository's sample project."""
    root = tmp_path / "sample"
    shutil.copytree(SAMPLE_DIR, root)
    return Settings(root=root)


@pytest.fixture
def fs(project: Settings) -> FileSystemStore:
    return FileSystemStore(project.root)
