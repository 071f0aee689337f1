"""Filesystem capability used by every chp component.

Components never touch the disk directly; they receive a FileSystem and
call it. The default LocalFileSystem maps onto pathlib. Tests substitute
an in-memory implementation.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for directory and file access.

    All methods raise OSError (or a subclass) on I/O failure; callers
    translate that into the matching chp error.
    """

    def list_dir(self, path: Path) -> list[str]:
        """Return the names of the immediate children of a directory."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True if path is an existing directory."""
        ...

    def exists(self, path: Path) -> bool:
        """Return True if path exists."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a whole file as UTF-8 text."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Create or overwrite a file with UTF-8 text."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents. Existing directories are fine."""
        ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def list_dir(self, path: Path) -> list[str]:
        return [entry.name for entry in path.iterdir()]

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        # newline="" keeps the template's line endings on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
