"""Write generated source to stdout or a file."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

LOGGER = logging.getLogger(__name__)


def write(
    artifact: bytes,
    output_path: Optional[Union[str, Path]] = None,
    stream: Optional[BinaryIO] = None,
) -> None:
    """Write ``artifact`` to ``output_path``, or to ``stream`` when no path is given.

    The parent directory of ``output_path`` must already exist. A file left
    behind by a failed write is removed before the error propagates.
    """
    # Path("") collapses to Path("."), so both spellings mean "no file".
    if output_path is None or str(output_path) in ("", "."):
        out = stream if stream is not None else sys.stdout.buffer
        out.write(artifact)
        out.flush()
        LOGGER.info("Wrote %d bytes to standard output", len(artifact))
        return

    path = Path(output_path)
    handle = path.open("wb")
    try:
        with handle:
            handle.write(artifact)
            handle.flush()
    except OSError:
        LOGGER.warning("Removing partial output %s", path)
        path.unlink(missing_ok=True)
        raise
    LOGGER.info("Wrote %d bytes to %s", len(artifact), path)


__all__ = ["write"]
