"""File templates written into newly scaffolded projects."""

# {name} is replaced with the project name; no other placeholders exist.
CONFIG_TEMPLATE = """\
name = "{name}"
command = "g++"

# chp will recursively look for cpp files in these directories.
# This variable is optional, *if* you provide the files you want
# to compile in the debug and release profiles.
compile_cpp_in_dirs = [
    "src"
]

[profiles]
debug = [
    # All cpp files found in the directories provided in the
    # `compile_cpp_in_dirs` list, will be inserted here.
    "-fdiagnostics-color=always",
    "-std=c++20",
    "-Wall",
    "-Wextra",
    "-pedantic",
    "-Weffc++",
    "-Wsuggest-attribute=const",
    "-fconcepts",
    "-Og",
    "-g",
    "-o",
    "build/debug/{name}.exe",
]
release = [
    # All cpp files found in the directories provided in the
    # `compile_cpp_in_dirs` list, will be inserted here.
    "-fdiagnostics-color=always",
    "-std=c++20",
    "-Wall",
    "-Wextra",
    "-pedantic",
    "-Weffc++",
    "-Wsuggest-attribute=const",
    "-fconcepts",
    "-O2",
    "-o",
    "build/release/{name}.exe",
]
"""

MAIN_TEMPLATE = """\
#include <iostream>

int main() {
    std::cout << "Hello, World" << std::endl;
}
"""


def render_config(name: str) -> str:
    """Render the default chp.toml for a project."""
    return CONFIG_TEMPLATE.replace("{name}", name)
