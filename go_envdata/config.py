#!/usr/bin/env python3
"""Configuration for go-envdata invocations."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

# Variables that describe the generating shell rather than the program.
ALWAYS_IGNORE = frozenset({"PWD", "SHLVL", "_", "PATH"})

DEFAULT_PACKAGE = "env"

DEFAULT_CONFIG: Dict[str, Any] = {
    "package": DEFAULT_PACKAGE,
    "ignore": [],
    "log_level": "WARNING",
}


class Mode(str, enum.Enum):
    RELEASE = "release"
    DEV = "dev"


@dataclass(frozen=True)
class Config:
    """Options for one invocation; built once and never mutated."""

    package_name: str = DEFAULT_PACKAGE
    output_path: Optional[Path] = None
    ignore_list: Tuple[str, ...] = ()
    mode: Mode = Mode.RELEASE
    log_level: str = "WARNING"

    @property
    def dev(self) -> bool:
        return self.mode is Mode.DEV


def new_default_config() -> Config:
    return Config()


def normalize_ignore(value: object) -> Tuple[str, ...]:
    """Accept a whitespace-separated string or a list of names."""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    if isinstance(value, (list, tuple, set, frozenset)):
        names = []
        for item in value:
            if not isinstance(item, str):
                raise ValueError(f"ignore entries must be strings, got {item!r}")
            names.extend(item.split())
        return tuple(names)
    raise ValueError(f"ignore must be a string or a list, got {type(value).__name__}")


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load defaults from a YAML file, or fall back to the built-in ones."""
    cfg = dict(DEFAULT_CONFIG)
    if path is None:
        return cfg
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc
    if data is None:
        return cfg
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    unknown = sorted(str(key) for key in set(data) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"unknown keys in config file {path}: {', '.join(unknown)}")
    cfg.update(data)
    cfg["ignore"] = list(normalize_ignore(cfg.get("ignore")))
    return cfg


__all__ = [
    "ALWAYS_IGNORE",
    "Config",
    "DEFAULT_CONFIG",
    "Mode",
    "load_config",
    "new_default_config",
    "normalize_ignore",
]
