"""chp.toml parsing and serialization.

Schema:
    name = "demo"                      # required, string
    command = "g++"                    # required, string
    compile_cpp_in_dirs = ["src"]      # optional, list of strings
                                       # (also accepted as source_dirs)

    [profiles]
    debug = ["-Og", "-g", ...]         # required, list of strings
    release = ["-O2", ...]             # required, list of strings

Loading is all-or-nothing: any missing or mistyped required field fails
the whole parse. Unknown keys are ignored.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..errors import ConfigParseError, ConfigReadError
from ..fs import FileSystem

# Keys accepted for the source directory list, in the order they are written out
SOURCE_DIR_KEYS = ("compile_cpp_in_dirs", "source_dirs")


@dataclass(frozen=True)
class Profiles:
    """Compiler flag lists for the two build profiles.

    Flags are opaque strings forwarded verbatim to the compiler.
    """

    debug: tuple[str, ...]
    release: tuple[str, ...]


@dataclass(frozen=True)
class ProjectConfig:
    """Parsed contents of chp.toml.

    Attributes:
        name: Project name, used for the produced binary's file name
        command: Compiler executable to invoke
        source_dirs: Root-relative directories searched for .cpp files,
            or None to disable source discovery
        profiles: Debug and release flag lists
    """

    name: str
    command: str
    source_dirs: Optional[tuple[str, ...]]
    profiles: Profiles


def load_config(config_path: Path, fs: FileSystem) -> ProjectConfig:
    """Read and parse a chp.toml file.

    Args:
        config_path: Path to chp.toml
        fs: Filesystem to read from

    Returns:
        The parsed ProjectConfig

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the content is invalid
    """
    try:
        text = fs.read_text(config_path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(config_path, e) from e

    return parse_config(text, source=str(config_path))


def parse_config(text: str, source: Optional[str] = None) -> ProjectConfig:
    """Parse chp.toml content.

    Args:
        text: TOML document
        source: Where the text came from, for error messages

    Raises:
        ConfigParseError: If the document is not valid TOML or violates the schema
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"invalid TOML: {e}", source) from e

    name = _require_string(data, "name", source)
    command = _require_string(data, "command", source)

    present = [key for key in SOURCE_DIR_KEYS if key in data]
    if len(present) > 1:
        raise ConfigParseError(f"only one of {' and '.join(SOURCE_DIR_KEYS)} may be set", source)
    source_dirs = _require_string_list(data, present[0], source) if present else None

    profiles_table = data.get("profiles")
    if profiles_table is None:
        raise ConfigParseError("missing required table [profiles]", source)
    if not isinstance(profiles_table, dict):
        raise ConfigParseError("'profiles' must be a table", source)

    profiles = Profiles(
        debug=_require_string_list(profiles_table, "debug", source, table="profiles"),
        release=_require_string_list(profiles_table, "release", source, table="profiles"),
    )

    return ProjectConfig(name=name, command=command, source_dirs=source_dirs, profiles=profiles)


def dump_config(config: ProjectConfig) -> str:
    """Serialize a ProjectConfig to chp.toml content.

    parse_config(dump_config(config)) == config holds for every config.
    """
    lines = [
        f"name = {_quote(config.name)}",
        f"command = {_quote(config.command)}",
    ]
    if config.source_dirs is not None:
        lines.append(f"{SOURCE_DIR_KEYS[0]} = {_format_list(config.source_dirs)}")
    lines.append("")
    lines.append("[profiles]")
    lines.append(f"debug = {_format_list(config.profiles.debug)}")
    lines.append(f"release = {_format_list(config.profiles.release)}")
    return "\n".join(lines) + "\n"


def _field_name(key: str, table: Optional[str]) -> str:
    return f"{table}.{key}" if table else key


def _require_string(data: dict[str, Any], key: str, source: Optional[str]) -> str:
    if key not in data:
        raise ConfigParseError(f"missing required field '{key}'", source)
    value = data[key]
    if not isinstance(value, str):
        raise ConfigParseError(f"'{key}' must be a string", source)
    return value


def _require_string_list(
    data: dict[str, Any],
    key: str,
    source: Optional[str],
    table: Optional[str] = None,
) -> tuple[str, ...]:
    field = _field_name(key, table)
    if key not in data:
        raise ConfigParseError(f"missing required field '{field}'", source)
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigParseError(f"'{field}' must be a list of strings", source)
    return tuple(value)


_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _quote(value: str) -> str:
    """Render a TOML basic string."""
    out = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def _format_list(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(_quote(v) for v in values) + "]"
