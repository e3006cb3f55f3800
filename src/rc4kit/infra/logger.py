"""
Logging setup for the ``rc4kit`` logger hierarchy.
"""

from __future__ import annotations

__all__ = ["setup_logging"]

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rc4kit.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILENAME = f"{PACKAGE_NAME}.log"

_MANAGED_ATTR = "_rc4kit_managed"


def setup_logging(
    log_level: str | int = "INFO",
    log_dir: str | Path | None = None,
    *,
    max_bytes: int = 1_048_576,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the handlers installed by a previous call;
    handlers added by the application are left alone.

    Args:
        log_level: Level name (``"DEBUG"``, ``"INFO"``, ...) or number.
        log_dir: Directory for a rotating log file. Console only if None.
        max_bytes: Rotate the log file once it reaches this size.
        backup_count: Number of rotated files to keep.

    Returns:
        The configured ``rc4kit`` logger.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")
    else:
        level = log_level

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _MANAGED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    setattr(console, _MANAGED_ATTR, True)
    logger.addHandler(console)

    if log_dir is not None:
        log_path = Path(log_dir).expanduser().resolve()
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / LOG_FILENAME,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _MANAGED_ATTR, True)
        logger.addHandler(file_handler)

    return logger
