"""Build Context - what a build resolved to and how it ended.

This module defines:
- BuildParams: Basic build parameters from the CLI
- BuildInvocation: The concrete compiler command line
- BuildResult: Outcome of one build pass

Design:
    BuildParams flows from CLI -> orchestrator. The orchestrator resolves
    the project root and configuration, creates the BuildInvocation, runs
    it, and returns a BuildResult that the runner uses to decide whether
    the produced binary may be started.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..config.project_config import ProjectConfig
from .build_profiles import BuildProfile


@dataclass(frozen=True)
class BuildParams:
    """Basic build parameters from the CLI.

    Attributes:
        cwd: Directory chp was invoked from
        profile: Build profile to use
        verbose: Whether to enable verbose output
    """

    cwd: Path
    profile: BuildProfile
    verbose: bool = False

    @classmethod
    def create(cls, cwd: Path, release: bool, verbose: bool = False) -> "BuildParams":
        """Create BuildParams from the CLI's --release switch."""
        return cls(cwd=cwd, profile=BuildProfile.from_release_flag(release), verbose=verbose)

    @property
    def release(self) -> bool:
        return self.profile is BuildProfile.RELEASE


@dataclass(frozen=True)
class BuildInvocation:
    """The compiler command line for one build.

    Attributes:
        command: Compiler executable (from chp.toml)
        args: Discovered sources first, then the profile's flags
        cwd: Working directory of the compiler process
    """

    command: str
    args: tuple[str, ...]
    cwd: Path

    @classmethod
    def create(cls, command: str, sources: Sequence[Path], flags: Sequence[str], cwd: Path) -> "BuildInvocation":
        """Assemble the argument vector: sources in enumeration order, then flags."""
        # as_posix keeps separators stable in the argument vector on every host
        args = tuple(source.as_posix() for source in sources) + tuple(flags)
        return cls(command=command, args=args, cwd=cwd)

    def command_line(self) -> list[str]:
        """Return the full argv, command included."""
        return [self.command, *self.args]


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one build pass.

    A build that wrote anything to stderr is "stopped": its diagnostics
    were forwarded and a following run step must be skipped. A stopped
    build is not an error.

    Attributes:
        root: Project root directory
        config: Configuration the build used
        profile: Profile the build used
        invocation: The compiler command line that was run
        returncode: Compiler exit status
        stderr: Raw compiler standard error
    """

    root: Path
    config: ProjectConfig
    profile: BuildProfile
    invocation: BuildInvocation
    returncode: int
    stderr: bytes

    @property
    def stopped(self) -> bool:
        """True when the compiler wrote to stderr."""
        return bool(self.stderr)
