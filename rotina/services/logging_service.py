from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from ..core import config

LOGGER_NAME = "rotina"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_dir: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Attach console and file handlers to the ``rotina`` logger.

    Idempotent: safe to call multiple times. Library modules only ever call
    ``logging.getLogger(__name__)``; wiring handlers is left to the host
    application, which calls this once at startup.
    """
    log_dir = Path(log_dir) if log_dir is not None else config.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "engine.log"

    level_name = (level or config.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if not any(
        getattr(h, "baseFilename", None) == str(log_path)
        for h in logger.handlers
        if isinstance(h, logging.FileHandler)
    ):
        file_handler = logging.FileHandler(str(log_path))
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not any(
        type(h) is logging.StreamHandler
        for h in logger.handlers
    ):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(log_level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger
