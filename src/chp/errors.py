"""Exceptions raised by chp.

Every failure surfaces immediately and terminates the current command.
The CLI catches ChpError at the top level and reports its message.
"""

from pathlib import Path
from typing import Optional


class ChpError(Exception):
    """Base class for all chp errors."""

    pass


class RootNotFoundError(ChpError):
    """Raised when no ancestor of the start directory contains chp.toml."""

    def __init__(self, start_dir: Path):
        self.start_dir = start_dir
        super().__init__(f"Could not find root (chp.toml not found in {start_dir} or any parent directory)")


class DirectoryReadError(ChpError):
    """Raised when a directory cannot be listed while locating the project root."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        super().__init__(f"Could not read directory {path}: {reason}")


class ConfigReadError(ChpError):
    """Raised when chp.toml exists but cannot be read."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class ConfigParseError(ChpError):
    """Raised when chp.toml is not valid TOML or does not match the schema."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class DirectoryWalkError(ChpError):
    """Raised when a configured source directory is missing or cannot be walked."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        super().__init__(f"Could not search for sources in {path}: {reason}")


class NonEmptyDirectoryError(ChpError):
    """Raised when scaffolding into a directory that already has entries."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Project folder is not empty: {path}")


class GitInitError(ChpError):
    """Raised when `git init` cannot be spawned or reports errors."""

    pass


class ProcessSpawnError(ChpError):
    """Raised when an external program cannot be started."""

    def __init__(self, command: str, reason: object):
        self.command = command
        super().__init__(f"Could not execute {command}: {reason}")


class ScaffoldWriteError(ChpError):
    """Raised when a project directory or file cannot be created."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        super().__init__(f"Could not create {path}: {reason}")
