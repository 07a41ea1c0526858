"""Logging configuration for orbitip."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(log_path: Path | None, level: int = logging.INFO) -> None:
    """Configure package logger: rotating file when a path is given, stderr otherwise.

    Idempotent — skips if handler is already attached.
    """
    root = logging.getLogger("orbitip")
    if root.handlers:
        return

    handler: logging.Handler
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))

    root.setLevel(level)
    root.addHandler(handler)
