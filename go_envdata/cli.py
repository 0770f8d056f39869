"""Command-line interface for go-envdata."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .config import Config, Mode, load_config, normalize_ignore
from .pipeline import transcribe
from .utils import configure_logging, ensure_package_name

PROG = "go-envdata"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class _ArgumentParser(argparse.ArgumentParser):
    """Exit with status 1 on usage errors, like every other failure."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description=(
            "Capture the current environment into a Go package whose init() "
            "sets any variable that is unset or empty at runtime."
        ),
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-pkg",
        "--pkg",
        dest="package",
        help="Package name to use in generated code (default: env)",
    )
    parser.add_argument(
        "-o",
        "--o",
        dest="output",
        default="",
        help="Optional name of the output file to be generated; empty writes to stdout",
    )
    parser.add_argument(
        "-ignore",
        "--ignore",
        dest="ignore",
        help="Space separated list of environment variables to ignore",
    )
    parser.add_argument(
        "-dev",
        "--dev",
        action="store_true",
        help="Do not capture the environment; generate a file that just reads from the runtime environment",
    )
    parser.add_argument(
        "-config",
        "--config",
        type=Path,
        help="Optional YAML file with defaults for package, ignore and log_level",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level on stderr (default: WARNING)",
    )
    return parser


def parse_config(
    argv: Optional[Iterable[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> Config:
    """Parse ``argv`` on top of the defaults file (if any) into a :class:`Config`."""
    parser = parser or build_parser()
    args = parser.parse_args(None if argv is None else list(argv))
    cfg = load_config(args.config)

    package = args.package if args.package is not None else cfg["package"]
    try:
        ensure_package_name(package)
    except ValueError as exc:
        parser.error(str(exc))

    log_level = args.log_level or str(cfg["log_level"]).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"invalid log_level {cfg['log_level']!r}")

    ignore = normalize_ignore(args.ignore) if args.ignore is not None else tuple(cfg["ignore"])
    return Config(
        package_name=package,
        output_path=Path(args.output) if args.output else None,
        ignore_list=ignore,
        mode=Mode.DEV if args.dev else Mode.RELEASE,
        log_level=log_level,
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    try:
        config = parse_config(argv, parser)
        configure_logging(config.log_level)
        transcribe(config)
    except (OSError, ValueError) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1
    return 0


__all__ = ["build_parser", "main", "parse_config"]
