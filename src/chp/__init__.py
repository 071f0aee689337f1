"""chp - a minimal build tool for small C++ projects."""

__version__ = "0.1.0"
