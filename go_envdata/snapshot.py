"""Capture the process environment, minus ignored variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Union

from .config import ALWAYS_IGNORE, normalize_ignore

LOGGER = logging.getLogger(__name__)

Environ = Union[Mapping[str, str], Iterable[str]]


@dataclass
class SnapshotStats:
    """Counters for one capture."""

    seen: int = 0
    ignored: int = 0
    captured: int = 0

    def log(self) -> None:
        LOGGER.info(
            "snapshot stats seen=%d ignored=%d captured=%d",
            self.seen,
            self.ignored,
            self.captured,
        )


def build_ignore_set(ignore_list: Union[str, Iterable[str]] = ()) -> frozenset:
    """Whitespace-split names from a string or a list, plus the built-in names."""
    return ALWAYS_IGNORE | frozenset(normalize_ignore(ignore_list))


def parse_entries(entries: Iterable[str]) -> Dict[str, str]:
    """Split raw ``NAME=VALUE`` entries on the first ``=``; later entries win."""
    env: Dict[str, str] = {}
    for entry in entries:
        name, _, value = entry.partition("=")
        if not name:
            # Windows keeps per-drive cwd entries such as "=C:=C:\\".
            continue
        env[name] = value
    return env


def snapshot(ignore_list: Union[str, Iterable[str]] = (), environ: Optional[Environ] = None) -> Dict[str, str]:
    """Return the visible environment with the ignore set removed.

    ``environ`` defaults to :data:`os.environ`. It may also be an iterable of
    raw ``NAME=VALUE`` strings, as produced by ``env`` or ``/proc/<pid>/environ``.
    """
    ignore = build_ignore_set(ignore_list)
    if environ is None:
        environ = os.environ
    if isinstance(environ, Mapping):
        items = dict(environ)
    else:
        items = parse_entries(environ)

    stats = SnapshotStats()
    captured: Dict[str, str] = {}
    for name, value in items.items():
        stats.seen += 1
        if name in ignore:
            LOGGER.debug("ignoring %s", name)
            stats.ignored += 1
            continue
        captured[name] = value
    stats.captured = len(captured)
    stats.log()
    return captured


__all__ = ["SnapshotStats", "build_ignore_set", "parse_entries", "snapshot"]
