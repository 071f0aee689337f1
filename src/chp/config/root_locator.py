"""Project root lookup.

The project root is the nearest directory, starting at the invocation
directory and walking up through its parents, that directly contains a
file named chp.toml.
"""

import logging
from pathlib import Path

from ..errors import DirectoryReadError, RootNotFoundError
from ..fs import FileSystem

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "chp.toml"


def find_root(start_dir: Path, fs: FileSystem) -> Path:
    """Find the project root for start_dir.

    Args:
        start_dir: Directory chp was invoked from (absolute)
        fs: Filesystem to inspect

    Returns:
        The first of start_dir and its ancestors containing chp.toml

    Raises:
        DirectoryReadError: If a directory on the way up cannot be listed
        RootNotFoundError: If the filesystem root is reached without a match
    """
    for directory in (start_dir, *start_dir.parents):
        try:
            names = fs.list_dir(directory)
        except OSError as e:
            raise DirectoryReadError(directory, e) from e

        if CONFIG_FILE_NAME in names:
            logger.debug("Found project root %s", directory)
            return directory

    raise RootNotFoundError(start_dir)


def find_config_path(start_dir: Path, fs: FileSystem) -> Path:
    """Return the path of the chp.toml governing start_dir."""
    return find_root(start_dir, fs) / CONFIG_FILE_NAME
