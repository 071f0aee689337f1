"""Build-then-run.

Runs a build pass and, unless the compiler wrote to stderr, starts the
produced binary at <root>/build/<profile>/<name>.<suffix> with the
caller's pass-through arguments. The binary's stdout and stderr are
forwarded verbatim once it exits. Its exit status is not interpreted.
"""

import logging
import sys
from typing import BinaryIO, Optional, Sequence

from ..output import forward_bytes, log
from ..process import ProcessResult
from .build_context import BuildParams
from .orchestrator import BuildOrchestrator
from .platform_naming import ExecutableNaming

logger = logging.getLogger(__name__)


class BinaryRunner:
    """Builds a project and runs the produced binary."""

    def __init__(
        self,
        orchestrator: Optional[BuildOrchestrator] = None,
        naming: Optional[ExecutableNaming] = None,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
    ):
        """Initialize binary runner.

        Args:
            orchestrator: Build orchestrator; its process runner also starts the binary
            naming: Executable naming policy (defaults to CHP_EXE_SUFFIX or "exe")
            stdout: Binary stream receiving the program's stdout
            stderr: Binary stream receiving the program's stderr
        """
        self.orchestrator = orchestrator if orchestrator is not None else BuildOrchestrator()
        self.naming = naming if naming is not None else ExecutableNaming.from_env()
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    @property
    def stderr(self) -> BinaryIO:
        return self._stderr if self._stderr is not None else sys.stderr.buffer

    def run(self, params: BuildParams, args: Sequence[str] = ()) -> Optional[ProcessResult]:
        """Build, then run the produced binary.

        Args:
            params: Invocation directory and profile
            args: Arguments passed through to the binary

        Returns:
            The binary's ProcessResult, or None if the build stopped on
            compiler stderr and the binary was not started

        Raises:
            ProcessSpawnError: The compiler or the binary could not be started
            (plus everything BuildOrchestrator.build raises)
        """
        build_result = self.orchestrator.build(params)
        if build_result.stopped:
            logger.debug("Compiler reported diagnostics; not running the binary")
            return None

        binary = self.naming.binary_path(build_result.root, build_result.profile, build_result.config.name)
        log(f"Running {binary}")

        result = self.orchestrator.runner.run(str(binary), list(args), params.cwd)
        logger.debug("%s exited with %d", binary, result.returncode)

        forward_bytes(result.stdout, self.stdout)
        forward_bytes(result.stderr, self.stderr)
        return result
