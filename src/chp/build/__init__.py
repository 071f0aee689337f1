"""
Build system components for chp.

This module provides the build pipeline:
- Source file discovery
- Profile selection
- Compiler invocation
- Running the produced binary
"""

from .build_context import BuildInvocation, BuildParams, BuildResult
from .build_profiles import BuildProfile, select_profile_flags
from .orchestrator import BuildOrchestrator
from .platform_naming import ExecutableNaming
from .runner import BinaryRunner
from .source_scanner import SourceScanner, discover_sources

__all__ = [
    "BinaryRunner",
    "BuildInvocation",
    "BuildOrchestrator",
    "BuildParams",
    "BuildProfile",
    "BuildResult",
    "ExecutableNaming",
    "SourceScanner",
    "discover_sources",
    "select_profile_flags",
]
