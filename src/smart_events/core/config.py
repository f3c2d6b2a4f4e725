from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Smart Events"
APP_AUTHOR = "SmartEvents"
DATA_DIR = Path(os.getenv("SMART_EVENTS_LOG_DIR") or user_data_dir(APP_NAME, APP_AUTHOR))

MINUTES_PER_DAY = 24 * 60
MIN_YEAR = 1900
MAX_YEAR = 3000


def ensure_data_dir() -> Path:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR
