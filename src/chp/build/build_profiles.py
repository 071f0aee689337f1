"""Build Profile selection.

A project declares two flag lists in chp.toml, one per profile. chp does
not know or care what those flags are: the selected list is forwarded to
the compiler verbatim, never merged with the other profile.
"""

from enum import Enum

from ..config.project_config import ProjectConfig


class BuildProfile(Enum):
    """Build profile enum for type-safe profile selection."""

    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self) -> str:
        """Return the string value for directory names and display."""
        return self.value

    @classmethod
    def from_release_flag(cls, release: bool) -> "BuildProfile":
        """Map the CLI's --release switch to a profile."""
        return cls.RELEASE if release else cls.DEBUG


def select_profile_flags(config: ProjectConfig, release: bool) -> list[str]:
    """Get the compiler flags of the selected profile.

    Args:
        config: Parsed project configuration
        release: True for the release profile, False for debug

    Returns:
        A copy of the selected profile's flag list, unchanged
    """
    if release:
        return list(config.profiles.release)
    return list(config.profiles.debug)


def format_profile_banner(profile: BuildProfile, compiler: str | None = None) -> str:
    """Format a build profile banner for display.

    Args:
        profile: BuildProfile enum value
        compiler: Compiler command (optional)

    Returns:
        Formatted banner string
    """
    parts = [f"PROFILE={profile.value}"]
    if compiler:
        parts.append(f"COMPILER={compiler}")

    return " ".join(parts)
