import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class FileSystemStore:
    """Reads sources and writes build artifacts on the local filesystem."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path).resolve()

    def _safe_path(self, path: str | Path) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def read_text(self, path: str | Path) -> str:
        """Read a UTF-8 text file. Raises FileNotFoundError."""
        target = self._safe_path(path)
        with open(target, encoding="utf-8") as f:
            return f.read()

    def read_yaml(self, path: str | Path) -> Any:
        """Read and parse a YAML file. Parser errors propagate."""
        target = self._safe_path(path)
        with open(target, encoding="utf-8") as f:
            return yaml.safe_load(f)

    def list_dir(self, path: str | Path) -> list[str]:
        """List file names in a directory, sorted."""
        target = self._safe_path(path)
        return sorted(entry.name for entry in target.iterdir() if entry.is_file())

    def exists(self, path: str | Path) -> bool:
        return self._safe_path(path).exists()

    def write_text(self, path: str | Path, content: str) -> Path:
        """Write the whole content in one call and return the target path."""
        target = self._safe_path(path)
        # Ensure parent exists
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug("Wrote %s (%d chars)", target, len(content))
        return target
