"""End-to-end capture, emission and output."""
from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from .config import Config, Mode
from .emitter import emit
from .sink import write
from .snapshot import Environ, snapshot

logger = logging.getLogger(__name__)


def transcribe(
    config: Config,
    environ: Optional[Environ] = None,
    stream: Optional[BinaryIO] = None,
) -> bytes:
    """Capture the environment per ``config`` and write the generated Go file."""
    logger.info("Generating package %s in %s mode", config.package_name, config.mode.value)
    if config.mode is Mode.RELEASE:
        logger.info("Stage 1/3: capturing environment (ignore=%s)", " ".join(config.ignore_list) or "-")
        captured = snapshot(config.ignore_list, environ)
        logger.info("Stage 1 complete (%d variables)", len(captured))
    else:
        logger.info("Stage 1/3 skipped: dev mode reads the live environment")
        captured = {}

    logger.info("Stage 2/3: rendering Go source")
    artifact = emit(config.mode, config.package_name, captured)

    logger.info("Stage 3/3: writing output to %s", config.output_path or "stdout")
    write(artifact, config.output_path, stream=stream)
    return artifact


__all__ = ["transcribe"]
