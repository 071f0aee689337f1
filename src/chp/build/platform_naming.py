"""Executable naming policy.

Produced binaries live at build/<profile>/<name>.<suffix> under the
project root. The suffix is the same on every host ("exe" by default,
matching the scaffolded chp.toml) and can be overridden with the
CHP_EXE_SUFFIX environment variable.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .build_profiles import BuildProfile

DEFAULT_EXE_SUFFIX = "exe"
BUILD_DIR_NAME = "build"


@dataclass(frozen=True)
class ExecutableNaming:
    """Maps a project name and profile to the produced binary's location."""

    suffix: str = DEFAULT_EXE_SUFFIX

    @classmethod
    def from_env(cls) -> "ExecutableNaming":
        """Create a policy honoring CHP_EXE_SUFFIX when it is set."""
        suffix = os.environ.get("CHP_EXE_SUFFIX")
        if suffix is None:
            return cls()
        return cls(suffix=suffix.lstrip("."))

    def binary_name(self, name: str) -> str:
        """Return the binary's file name, e.g. 'demo.exe'."""
        if not self.suffix:
            return name
        return f"{name}.{self.suffix}"

    def binary_path(self, root: Path, profile: BuildProfile, name: str) -> Path:
        """Return <root>/build/<profile>/<binary_name>."""
        return root / BUILD_DIR_NAME / profile.value / self.binary_name(name)
