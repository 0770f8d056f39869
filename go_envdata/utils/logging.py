"""Logging utilities."""
from __future__ import annotations

import logging
import sys
from typing import Optional


def configure_logging(level: Optional[str] = None) -> None:
    """Send diagnostics to stderr at ``level`` (WARNING when unset).

    Without ``-o`` the generated Go file is the only thing on stdout and is
    usually redirected straight into a source tree, so no log record may land
    there. The quiet default keeps a plain run silent; ``--log-level info``
    shows the capture, render and write stages. Repeated calls are no-ops.
    """
    if getattr(configure_logging, "_configured", False):
        return
    logging.basicConfig(
        level=getattr(logging, str(level or "WARNING").upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    configure_logging._configured = True


__all__ = ["configure_logging"]
