"""Capture the process environment into a Go source file of defaults."""

__version__ = "0.1.0"

__all__ = ["__version__"]
