"""End-to-end tests: real disk, real child processes, Python standing in for the compiler."""

import io
import stat
import sys
from pathlib import Path

import pytest

from chp.build.build_context import BuildParams
from chp.build.orchestrator import BuildOrchestrator
from chp.build.platform_naming import ExecutableNaming
from chp.build.runner import BinaryRunner
from chp.config.project_config import Profiles, ProjectConfig, dump_config

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="uses a shell-script binary")

# Writes the -o output as a shell script that echoes the .cpp arguments it
# was built from, followed by its own arguments.
FAKE_COMPILER = """\
import os, stat, sys
args = sys.argv[1:]
out = args[args.index("-o") + 1]
os.makedirs(os.path.dirname(out), exist_ok=True)
with open(out, "w") as f:
    f.write("#!/bin/sh\\necho built-from " + " ".join(a for a in args if a.endswith(".cpp")) + " \\"$@\\"\\n")
os.chmod(out, os.stat(out).st_mode | stat.S_IEXEC)
"""


def _write_compiler(directory, body):
    compiler = directory / "fake_cc"
    compiler.write_text(f"#!{sys.executable}\n{body}")
    compiler.chmod(compiler.stat().st_mode | stat.S_IEXEC)
    return compiler


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "demo"
    (root / "src" / "util").mkdir(parents=True)
    (root / "src" / "main.cpp").write_text("int main() {}\n")
    (root / "src" / "util" / "helper.cpp").write_text("void helper() {}\n")
    (root / "src" / "util" / "helper.hpp").write_text("void helper();\n")
    compiler = _write_compiler(tmp_path, FAKE_COMPILER)

    config = ProjectConfig(
        name="demo",
        command=str(compiler),
        source_dirs=("src",),
        profiles=Profiles(
            debug=("-o", "build/debug/demo.exe"),
            release=("-o", "build/release/demo.exe"),
        ),
    )
    (root / "chp.toml").write_text(dump_config(config))
    return root


def _runner(stdout, stderr):
    return BinaryRunner(
        orchestrator=BuildOrchestrator(stderr=stderr),
        naming=ExecutableNaming(),
        stdout=stdout,
        stderr=stderr,
    )


def test_build_then_run(project):
    stdout, stderr = io.BytesIO(), io.BytesIO()

    result = _runner(stdout, stderr).run(BuildParams.create(project, release=False), ["one", "two"])

    binary = project / "build" / "debug" / "demo.exe"
    assert binary.exists()
    assert binary.stat().st_mode & stat.S_IEXEC
    assert result is not None and result.returncode == 0
    assert stderr.getvalue() == b""

    line = stdout.getvalue().decode()
    assert line.startswith("built-from ")
    assert "src/main.cpp" in line
    assert "src/util/helper.cpp" in line
    assert "helper.hpp" not in line
    assert line.rstrip().endswith("one two")


def test_release_build_location(project):
    BuildOrchestrator(stderr=io.BytesIO()).build(BuildParams.create(project, release=True))
    assert (project / "build" / "release" / "demo.exe").exists()
    assert not (project / "build" / "debug").exists()


def test_compiler_stderr_blocks_run(project, tmp_path):
    _write_compiler(tmp_path, "import sys\nsys.stderr.write('src/main.cpp:1: error: nope\\n')\n")
    stdout, stderr = io.BytesIO(), io.BytesIO()

    result = _runner(stdout, stderr).run(BuildParams.create(project, release=False))

    assert result is None
    assert stderr.getvalue() == b"src/main.cpp:1: error: nope\n"
    assert stdout.getvalue() == b""


def test_compiler_runs_in_invocation_directory(project, tmp_path):
    """Relative output paths in the flags resolve against the caller's cwd."""
    nested = project / "src" / "util"
    BuildOrchestrator(stderr=io.BytesIO()).build(BuildParams.create(nested, release=False))
    assert (nested / "build" / "debug" / "demo.exe").exists()
    assert not Path(project / "build").exists()
