"""Process-execution capability used by chp.

Every external program (compiler, built binary, git) is started through a
ProcessRunner and awaited to completion. There is no timeout; a hung child
hangs chp.
"""

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from .errors import ProcessSpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished child process.

    Attributes:
        returncode: Exit status of the child
        stdout: Captured standard output, raw bytes
        stderr: Captured standard error, raw bytes
    """

    returncode: int
    stdout: bytes
    stderr: bytes


@runtime_checkable
class ProcessRunner(Protocol):
    """Protocol for running a program synchronously with captured output."""

    def run(self, command: str, args: Sequence[str], cwd: Path) -> ProcessResult:
        """Run command with args in cwd and wait for it to exit.

        Raises:
            ProcessSpawnError: If the program cannot be started
        """
        ...


# Value of subprocess.CREATE_NO_WINDOW, which only exists on Windows builds
CREATE_NO_WINDOW = 0x08000000


class SubprocessRunner:
    """ProcessRunner backed by subprocess.run.

    Children read stdin from the null device, so a compiler or program that
    waits for input sees EOF instead of taking over the terminal. On Windows
    they are started without a console window of their own. stdout and stderr
    are always captured as bytes.
    """

    def __init__(self, platform: str = sys.platform):
        self.creationflags = CREATE_NO_WINDOW if platform == "win32" else 0

    def run(self, command: str, args: Sequence[str], cwd: Path) -> ProcessResult:
        cmd = [command, *args]
        logger.debug("Running %s in %s", cmd, cwd)
        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                creationflags=self.creationflags,
            )
        except OSError as e:
            raise ProcessSpawnError(command, e) from e
        logger.debug("%s exited with %d", command, completed.returncode)
        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
