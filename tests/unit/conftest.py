"""Shared fakes for chp unit tests.

MemoryFileSystem and StubProcessRunner implement the FileSystem and
ProcessRunner protocols without touching the disk or spawning processes.
"""

import sys
from pathlib import Path, PurePosixPath
from typing import Sequence

import pytest

from chp.errors import ProcessSpawnError
from chp.process import ProcessResult


class MemoryFileSystem:
    """In-memory FileSystem.

    Directories and files are kept in insertion order, so list_dir
    enumerates children in the order they were created.
    """

    def __init__(self) -> None:
        self.dirs: dict[str, None] = {"/": None}
        self.files: dict[str, str] = {}
        self.unreadable: set[str] = set()
        self.read_only: set[str] = set()
        self.writes: list[str] = []

    @staticmethod
    def _key(path: Path) -> str:
        return str(PurePosixPath(path))

    def add_dir(self, path: str | Path) -> None:
        p = PurePosixPath(path)
        for parent in reversed(p.parents):
            self.dirs.setdefault(str(parent), None)
        self.dirs.setdefault(str(p), None)

    def add_file(self, path: str | Path, content: str = "") -> None:
        p = PurePosixPath(path)
        self.add_dir(p.parent)
        self.files[str(p)] = content

    # FileSystem protocol

    def list_dir(self, path: Path) -> list[str]:
        key = self._key(path)
        if key in self.unreadable:
            raise PermissionError(f"Permission denied: {key}")
        if key not in self.dirs:
            raise FileNotFoundError(f"No such directory: {key}")
        names = []
        for entry in [*self.dirs, *self.files]:
            p = PurePosixPath(entry)
            if entry != "/" and str(p.parent) == key:
                names.append(p.name)
        return names

    def is_dir(self, path: Path) -> bool:
        return self._key(path) in self.dirs

    def exists(self, path: Path) -> bool:
        key = self._key(path)
        return key in self.dirs or key in self.files

    def read_text(self, path: Path) -> str:
        key = self._key(path)
        if key in self.unreadable:
            raise PermissionError(f"Permission denied: {key}")
        if key not in self.files:
            raise FileNotFoundError(f"No such file: {key}")
        return self.files[key]

    def write_text(self, path: Path, content: str) -> None:
        key = self._key(path)
        if key in self.read_only:
            raise PermissionError(f"Permission denied: {key}")
        if str(PurePosixPath(key).parent) not in self.dirs:
            raise FileNotFoundError(f"No such directory: {PurePosixPath(key).parent}")
        self.files[key] = content
        self.writes.append(key)

    def make_dirs(self, path: Path) -> None:
        if self._key(path) in self.read_only:
            raise PermissionError(f"Permission denied: {self._key(path)}")
        self.add_dir(path)
        self.writes.append(self._key(path))


class StubProcessRunner:
    """ProcessRunner that records calls and returns canned results."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str], Path]] = []
        self.results: dict[str, ProcessResult] = {}
        self.missing: set[str] = set()

    def set_result(self, command: str, returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.results[command] = ProcessResult(returncode=returncode, stdout=stdout, stderr=stderr)

    def run(self, command: str, args: Sequence[str], cwd: Path) -> ProcessResult:
        self.calls.append((command, list(args), cwd))
        if command in self.missing:
            raise ProcessSpawnError(command, FileNotFoundError(f"No such file or directory: '{command}'"))
        return self.results.get(command, ProcessResult(returncode=0, stdout=b"", stderr=b""))

    def commands(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def memory_fs():
    """Return an empty in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def stub_runner():
    """Return a process runner that succeeds silently for every command."""
    return StubProcessRunner()


DEMO_CONFIG = """\
name = "demo"
command = "cc"
source_dirs = ["src"]

[profiles]
debug = ["-O0", "-o", "build/debug/demo.out"]
release = ["-O2", "-o", "build/release/demo.out"]
"""


@pytest.fixture
def demo_project(memory_fs):
    """In-memory project at /work/demo with one source file."""
    memory_fs.add_file("/work/demo/chp.toml", DEMO_CONFIG)
    memory_fs.add_file("/work/demo/src/main.cpp", "int main() {}\n")
    return Path("/work/demo")


@pytest.fixture(autouse=True)
def isolate_output_globals():
    """Reset chp.output module globals before/after each test."""
    from chp import output

    original_start_time = output._start_time
    original_output_stream = output._output_stream
    original_verbose = output._verbose

    output._start_time = None
    output._output_stream = sys.stdout
    output._verbose = False

    yield

    output._start_time = original_start_time
    output._output_stream = original_output_stream
    output._verbose = original_verbose
