"""
Command-line interface for chp.

This module provides the `chp` CLI tool for scaffolding, building and
running small C++ projects.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.console import Console

from chp import __version__
from chp.build import BinaryRunner, BuildOrchestrator, BuildParams
from chp.commands import init_project, new_project
from chp.errors import ChpError
from chp.output import init_timer, is_verbose, log_error, set_verbose

console = Console(highlight=False)


@dataclass
class InitArgs:
    """Arguments for the init command."""

    cwd: Path


@dataclass
class NewArgs:
    """Arguments for the new command."""

    cwd: Path
    name: str


@dataclass
class BuildArgs:
    """Arguments for the build command."""

    cwd: Path
    release: bool = False
    verbose: bool = False


@dataclass
class RunArgs:
    """Arguments for the run command."""

    cwd: Path
    release: bool = False
    args: list[str] = field(default_factory=list)
    verbose: bool = False


def _fail(e: ChpError) -> None:
    log_error(str(e))
    if is_verbose() and e.__cause__ is not None:
        console.print(f"Caused by {type(e.__cause__).__name__}: {e.__cause__}")
    sys.exit(1)


def _interrupted(what: str) -> None:
    console.print()
    console.print(f"[bold yellow]✗ {what} interrupted[/bold yellow]")
    sys.exit(130)  # Standard exit code for SIGINT


def init_command(args: InitArgs) -> None:
    """Create a C++ project in the current directory, named after it.

    Examples:
        chp init
    """
    try:
        target = init_project(args.cwd)
        console.print(f"[bold green]✓ Created project {target.name}[/bold green]")
        sys.exit(0)
    except ChpError as e:
        _fail(e)
    except KeyboardInterrupt:
        _interrupted("Init")


def new_command(args: NewArgs) -> None:
    """Create a C++ project in a new directory.

    Examples:
        chp new demo
    """
    try:
        target = new_project(args.cwd, args.name)
        console.print(f"[bold green]✓ Created project {target.name}[/bold green]")
        sys.exit(0)
    except ChpError as e:
        _fail(e)
    except KeyboardInterrupt:
        _interrupted("New")


def build_command(args: BuildArgs) -> None:
    """Build the project according to chp.toml.

    Examples:
        chp build                  # Debug profile
        chp build --release        # Release profile
    """
    try:
        orchestrator = BuildOrchestrator()
        result = orchestrator.build(BuildParams.create(args.cwd, args.release, args.verbose))

        if result.stopped:
            console.print("[bold yellow]Compiler reported diagnostics (see above)[/bold yellow]")
        else:
            console.print("[bold green]✓ Build finished[/bold green]")
        sys.exit(0)
    except ChpError as e:
        _fail(e)
    except KeyboardInterrupt:
        _interrupted("Build")


def run_command(args: RunArgs) -> None:
    """Build the project, then run the produced binary.

    Examples:
        chp run                    # Build and run with the debug profile
        chp run --release          # Build and run with the release profile
        chp run -- --flag value    # Pass arguments to the program
    """
    try:
        runner = BinaryRunner()
        result = runner.run(BuildParams.create(args.cwd, args.release, args.verbose), args.args)

        if result is None:
            console.print("[bold yellow]Compiler reported diagnostics (see above); not running[/bold yellow]")
        sys.exit(0)
    except ChpError as e:
        _fail(e)
    except KeyboardInterrupt:
        _interrupted("Run")


def _passthrough_args(raw: Optional[list[str]]) -> list[str]:
    args = list(raw or [])
    if args and args[0] == "--":
        args = args[1:]
    return args


def main() -> None:
    """chp - build and run small C++ projects."""
    parser = argparse.ArgumentParser(
        prog="chp",
        description="chp - build and run small C++ projects",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"chp {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Shared by every command
    verbose_parent = argparse.ArgumentParser(add_help=False)
    verbose_parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    subparsers.add_parser(
        "init",
        parents=[verbose_parent],
        help="Initialize a C++ project in the current directory",
    )

    new_parser = subparsers.add_parser(
        "new",
        parents=[verbose_parent],
        help="Create a C++ project in a new directory",
    )
    new_parser.add_argument("name", help="Name of the new project (and its directory)")

    build_parser = subparsers.add_parser(
        "build",
        parents=[verbose_parent],
        help="Build the project according to chp.toml",
    )
    build_parser.add_argument(
        "--release",
        action="store_true",
        help="Use the release profile (default: debug)",
    )

    run_parser = subparsers.add_parser(
        "run",
        parents=[verbose_parent],
        help="Build and run the project according to chp.toml",
    )
    run_parser.add_argument(
        "--release",
        action="store_true",
        help="Use the release profile (default: debug)",
    )
    run_parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Arguments passed to the program; put them after -- when the first one starts with -",
    )

    parsed_args = parser.parse_args()

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    init_timer(sys.stdout)
    set_verbose(parsed_args.verbose)
    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    cwd = Path.cwd()

    if parsed_args.command == "init":
        init_command(InitArgs(cwd=cwd))
    elif parsed_args.command == "new":
        new_command(NewArgs(cwd=cwd, name=parsed_args.name))
    elif parsed_args.command == "build":
        build_command(BuildArgs(cwd=cwd, release=parsed_args.release, verbose=parsed_args.verbose))
    elif parsed_args.command == "run":
        run_command(
            RunArgs(
                cwd=cwd,
                release=parsed_args.release,
                args=_passthrough_args(parsed_args.args),
                verbose=parsed_args.verbose,
            )
        )


if __name__ == "__main__":
    main()
