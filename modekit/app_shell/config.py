"""
Project layout and runtime configuration.

Paths are resolved against a project root: ``MODEKIT_ROOT`` when set,
otherwise the current working directory.
"""

import os
from functools import lru_cache
from pathlib import Path

DEFAULT_MODE = "light"


class Settings:
    def __init__(self, root: Path | str | None = None) -> None:
        if root is None:
            root = os.environ.get("MODEKIT_ROOT") or os.getcwd()
        self.root = Path(root).resolve()

        # Components, consume the interoperable tokens.
        self.components_dir = self.root / "components"
        # Infrastructure, holds the intents list.
        self.infrastructure_dir = self.root / "infrastructure"
        # Modes, authored as YAML.
        self.modes_dir = self.root / "modes"
        # Public, hosts the generated CSS and inventory.
        self.public_dir = self.root / "public"

        self.intents_path = self.infrastructure_dir / "intents.yml"
        self.newmode_path = self.modes_dir / "newmode.yml"
        self.schema_path = self.modes_dir / "_schema.json"
        self.tokens_scss_path = self.components_dir / "_tokens.module.scss"
        self.inventory_path = self.public_dir / "_inventory.json"

        # URL prefix the public directory is served under.
        self.public_url = os.environ.get("MODEKIT_PUBLIC_URL", "/public/")
        self.default_mode = os.environ.get("MODEKIT_DEFAULT_MODE", DEFAULT_MODE)


@lru_cache
def get_settings() -> Settings:
    return Settings()
