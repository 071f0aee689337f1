"""Command implementations for chp CLI.

This package contains implementations of chp commands that are too
complex to fit in the main cli.py file.
"""

from chp.commands.scaffold import ProjectScaffolder, init_project, new_project

__all__ = ["ProjectScaffolder", "init_project", "new_project"]
