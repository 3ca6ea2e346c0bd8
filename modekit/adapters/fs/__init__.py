from .filestore import FileSystemStore

__all__ = ["FileSystemStore"]
