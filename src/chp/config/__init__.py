"""Project configuration for chp: root lookup and chp.toml parsing."""

from .project_config import ProjectConfig, Profiles, dump_config, load_config, parse_config
from .root_locator import CONFIG_FILE_NAME, find_config_path, find_root

__all__ = [
    "CONFIG_FILE_NAME",
    "ProjectConfig",
    "Profiles",
    "dump_config",
    "find_config_path",
    "find_root",
    "load_config",
    "parse_config",
]
