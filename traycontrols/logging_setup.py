# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "traycontrols"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the traycontrols logger namespace."""
    log_level = level or os.environ.get("TRAYCONTROLS_LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(numeric_level)
    # Repeated setup must not stack handlers.
    for handler in list(root.handlers):
        if getattr(handler, "_traycontrols", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler._traycontrols = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.propagate = False

    for name in ("PIL", "pystray", "plyer"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
