from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .core.config import DATA_DIR, ensure_data_dir

LOG_FILE_NAME = "smart_events.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Rotation: 1 MB per file, five backups.
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 5

_INITIALIZED = False


def _build_handlers(log_file: Path, console: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [
        RotatingFileHandler(str(log_file), maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    ]
    if console:
        handlers.append(logging.StreamHandler())
    return handlers


def configure_logging(level: str = "INFO", *, log_path: Optional[Path] = None, console: bool = True) -> Path:
    """Install the rotating log file (and optionally a console stream) on the root logger.

    Only the first call in a process has an effect. ``console=False`` keeps the
    terminal free for the interactive menu. Returns the log file path.
    """

    global _INITIALIZED
    log_file = log_path or DATA_DIR / LOG_FILE_NAME
    if _INITIALIZED:
        return log_file

    if log_path is None:
        ensure_data_dir()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in _build_handlers(log_file, console):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging to %s at %s", log_file, level.upper())
    return log_file


__all__ = ["LOG_FILE_NAME", "configure_logging"]
