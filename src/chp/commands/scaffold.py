"""Project scaffolding for `chp init` and `chp new`.

Layout written into the target directory:
    .git/               (from `git init`)
    chp.toml
    src/main.cpp
    build/debug/
    build/release/

Scaffolding is not transactional: if git or a later step fails, whatever
was already created stays on disk.
"""

import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from ..config.root_locator import CONFIG_FILE_NAME
from ..errors import DirectoryReadError, GitInitError, NonEmptyDirectoryError, ProcessSpawnError, ScaffoldWriteError
from ..fs import FileSystem, LocalFileSystem
from ..output import forward_bytes, log
from ..process import ProcessRunner, SubprocessRunner
from .templates import MAIN_TEMPLATE, render_config

logger = logging.getLogger(__name__)

DEFAULT_GIT = "git"


def get_git_command() -> str:
    """Get the git executable, respecting CHP_GIT."""
    return os.environ.get("CHP_GIT") or DEFAULT_GIT


class ProjectScaffolder:
    """Creates a new project skeleton in a directory."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        runner: Optional[ProcessRunner] = None,
        git: Optional[str] = None,
        stderr: Optional[BinaryIO] = None,
    ):
        """Initialize project scaffolder.

        Args:
            fs: Filesystem capability (defaults to the local disk)
            runner: Process capability used for `git init`
            git: Git executable (defaults to CHP_GIT or "git")
            stderr: Binary stream receiving git's error output
        """
        self.fs = fs if fs is not None else LocalFileSystem()
        self.runner = runner if runner is not None else SubprocessRunner()
        self.git = git if git is not None else get_git_command()
        self._stderr = stderr

    @property
    def stderr(self) -> BinaryIO:
        return self._stderr if self._stderr is not None else sys.stderr.buffer

    def scaffold(self, target: Path) -> Path:
        """Write a new project into target.

        The project is named after the target directory.

        Args:
            target: Directory to scaffold into; must be absent or empty

        Returns:
            The target directory

        Raises:
            NonEmptyDirectoryError: target already has entries (nothing is written)
            ScaffoldWriteError: target is not a directory, or a directory or
                file could not be created
            GitInitError: git could not be started or reported errors
        """
        log(f"Creating project in {target}")
        self._ensure_empty(target)

        self._make_dirs(target)
        self._git_init(target)

        name = target.name
        self._write(target / CONFIG_FILE_NAME, render_config(name))

        src_dir = target / "src"
        self._make_dirs(src_dir)
        self._write(src_dir / "main.cpp", MAIN_TEMPLATE)

        self._make_dirs(target / "build" / "debug")
        self._make_dirs(target / "build" / "release")

        logger.debug("Scaffolded project %s at %s", name, target)
        return target

    def _ensure_empty(self, target: Path) -> None:
        if not self.fs.is_dir(target):
            if self.fs.exists(target):
                raise ScaffoldWriteError(target, "a file with that name already exists")
            return
        try:
            entries = self.fs.list_dir(target)
        except OSError as e:
            raise DirectoryReadError(target, e) from e
        if entries:
            raise NonEmptyDirectoryError(target)

    def _make_dirs(self, path: Path) -> None:
        try:
            self.fs.make_dirs(path)
        except OSError as e:
            raise ScaffoldWriteError(path, e) from e

    def _write(self, path: Path, content: str) -> None:
        try:
            self.fs.write_text(path, content)
        except OSError as e:
            raise ScaffoldWriteError(path, e) from e

    def _git_init(self, target: Path) -> None:
        try:
            result = self.runner.run(self.git, ["init"], target)
        except ProcessSpawnError as e:
            raise GitInitError(f"Git is not installed ({e})") from e

        if result.stderr:
            forward_bytes(result.stderr, self.stderr)
            raise GitInitError("Could not initialize git")


def init_project(cwd: Path, fs: Optional[FileSystem] = None, runner: Optional[ProcessRunner] = None) -> Path:
    """Scaffold a project in cwd, named after it."""
    return ProjectScaffolder(fs=fs, runner=runner).scaffold(cwd)


def new_project(
    cwd: Path,
    name: str,
    fs: Optional[FileSystem] = None,
    runner: Optional[ProcessRunner] = None,
) -> Path:
    """Scaffold a project in a new directory cwd/name."""
    return ProjectScaffolder(fs=fs, runner=runner).scaffold(cwd / name)
