"""Build orchestration.

Pipeline for one build:
    1. Locate the project root (nearest chp.toml at or above cwd)
    2. Load chp.toml
    3. Discover .cpp sources, if source directories are configured
    4. Select the debug or release flag list
    5. Run the compiler with sources followed by flags, in cwd

Compiler stderr policy:
    Whatever the compiler writes to stderr is forwarded verbatim. Any
    stderr output stops the pipeline (a following run step is skipped),
    yet the build still completes normally. The compiler's exit status is
    logged but does not affect the outcome. Only a compiler that cannot
    be started is a hard failure.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from ..config.project_config import load_config
from ..config.root_locator import find_config_path
from ..fs import FileSystem, LocalFileSystem
from ..output import TimedLogger, forward_bytes, log_detail, log_warning
from ..process import ProcessRunner, SubprocessRunner
from .build_context import BuildInvocation, BuildParams, BuildResult
from .build_profiles import format_profile_banner, select_profile_flags
from .source_scanner import discover_sources

logger = logging.getLogger(__name__)


class BuildOrchestrator:
    """Runs the configuration-resolution and compile pipeline."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        runner: Optional[ProcessRunner] = None,
        stderr: Optional[BinaryIO] = None,
    ):
        """Initialize build orchestrator.

        Args:
            fs: Filesystem capability (defaults to the local disk)
            runner: Process capability (defaults to subprocess)
            stderr: Binary stream receiving compiler diagnostics
                (defaults to the process's stderr at build time)
        """
        self.fs = fs if fs is not None else LocalFileSystem()
        self.runner = runner if runner is not None else SubprocessRunner()
        self._stderr = stderr

    @property
    def stderr(self) -> BinaryIO:
        return self._stderr if self._stderr is not None else sys.stderr.buffer

    def build(self, params: BuildParams) -> BuildResult:
        """Build the project governing params.cwd.

        Args:
            params: Invocation directory and profile

        Returns:
            BuildResult; result.stopped is True if the compiler wrote to stderr

        Raises:
            RootNotFoundError: No chp.toml at or above cwd
            DirectoryReadError: A directory could not be listed during root lookup
            ConfigReadError: chp.toml could not be read
            ConfigParseError: chp.toml is invalid
            DirectoryWalkError: A source directory is missing or unreadable
            ProcessSpawnError: The compiler could not be started
        """
        config_path = find_config_path(params.cwd, self.fs)
        root = config_path.parent
        config = load_config(config_path, self.fs)

        sources = discover_sources(root, config.source_dirs, self.fs) if config.source_dirs is not None else []
        flags = select_profile_flags(config, params.release)
        invocation = BuildInvocation.create(config.command, sources, flags, params.cwd)
        logger.debug("Compiler command line: %s", invocation.command_line())

        with TimedLogger(f"Building {params.cwd}"):
            log_detail(format_profile_banner(params.profile, compiler=config.command), verbose_only=True)
            for source in sources:
                log_detail(source.as_posix(), verbose_only=True)

            result = self.runner.run(invocation.command, invocation.args, invocation.cwd)

        logger.debug("Compiler %s exited with %d", config.command, result.returncode)
        if result.returncode != 0 and not result.stderr:
            log_warning(f"{config.command} exited with status {result.returncode}")

        build_result = BuildResult(
            root=root,
            config=config,
            profile=params.profile,
            invocation=invocation,
            returncode=result.returncode,
            stderr=result.stderr,
        )

        if build_result.stopped:
            forward_bytes(result.stderr, self.stderr)

        return build_result
