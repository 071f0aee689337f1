"""Source file discovery.

Recursively collects .cpp files under the directories listed in
chp.toml. Only the listed directories are visited; there is no implicit
project-wide scan. The result is rebuilt on every build.
"""

import logging
from pathlib import Path, PurePath
from typing import Optional, Sequence

from ..errors import DirectoryWalkError
from ..fs import FileSystem

logger = logging.getLogger(__name__)

SOURCE_EXTENSION = "cpp"


class SourceScanner:
    """Finds source files under configured directories of a project.

    Paths are returned relative to the project root, in the order the
    filesystem enumerates them. The order is not sorted and can differ
    between platforms; callers must treat the result as a set.
    """

    def __init__(self, root: Path, fs: FileSystem, extension: str = SOURCE_EXTENSION):
        """Initialize source scanner.

        Args:
            root: Project root directory
            fs: Filesystem to walk
            extension: File extension (without dot) of source files
        """
        self.root = root
        self.fs = fs
        self.extension = extension

    def scan(self, directories: Optional[Sequence[str]]) -> list[Path]:
        """Collect source files under each listed directory.

        Args:
            directories: Root-relative directories, or None for no discovery

        Returns:
            Root-relative paths of every matching file

        Raises:
            DirectoryWalkError: If a directory is missing or cannot be read
        """
        sources: list[Path] = []
        for directory in directories or ():
            start = self.root / directory
            if not self.fs.is_dir(start):
                raise DirectoryWalkError(start, "no such directory")
            try:
                self._scan_dir(start, sources)
            except RecursionError as e:
                # Directory symlinks are followed, so a link back up the tree never ends
                raise DirectoryWalkError(start, "directories nested too deeply (symlink loop?)") from e

        logger.debug("Discovered %d source files under %s", len(sources), self.root)
        return sources

    def _scan_dir(self, directory: Path, sources: list[Path]) -> None:
        try:
            names = self.fs.list_dir(directory)
        except OSError as e:
            raise DirectoryWalkError(directory, e) from e

        for name in names:
            path = directory / name
            if self.fs.is_dir(path):
                self._scan_dir(path, sources)
            elif self._is_source(path):
                sources.append(path.relative_to(self.root))

    def _is_source(self, path: PurePath) -> bool:
        return path.suffix == f".{self.extension}"


def discover_sources(root: Path, directories: Optional[Sequence[str]], fs: FileSystem) -> list[Path]:
    """Collect root-relative .cpp paths under the given root-relative directories."""
    return SourceScanner(root, fs).scan(directories)
