"""Utility helpers."""

from .logging import configure_logging
from .validation import ensure_package_name

__all__ = ["configure_logging", "ensure_package_name"]
