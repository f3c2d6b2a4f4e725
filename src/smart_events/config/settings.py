from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class SchedulingSettings:
    """Working window and suggestion limits, all in minutes since midnight."""

    work_start: int = 8 * 60
    work_end: int = 20 * 60
    slot_step: int = 30
    max_suggestions: int = 5


@dataclass(frozen=True)
class AdminSettings:
    usernames: tuple[str, ...]
    password: str

    def accepts(self, username: str, password: str) -> bool:
        return username in self.usernames and password == self.password


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str


@dataclass(frozen=True)
class AppSettings:
    scheduling: SchedulingSettings
    admin: AdminSettings
    server: ServerSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _clock_from_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if len(raw) != 5 or raw[2] != ":":
        return default
    hours, minutes = raw[:2], raw[3:]
    if not (hours.isdigit() and minutes.isdigit()):
        return default
    value = int(hours) * 60 + int(minutes)
    # 24:00 is allowed as a window end
    if int(minutes) > 59 or value > 24 * 60:
        return default
    return value


def _names_from_env(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name) or default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    scheduling = SchedulingSettings(
        work_start=_clock_from_env("SMART_EVENTS_WORK_START", 8 * 60),
        work_end=_clock_from_env("SMART_EVENTS_WORK_END", 20 * 60),
        slot_step=max(_int_from_env("SMART_EVENTS_SLOT_STEP", 30), 1),
        max_suggestions=max(_int_from_env("SMART_EVENTS_MAX_SUGGESTIONS", 5), 0),
    )

    admin = AdminSettings(
        usernames=_names_from_env("SMART_EVENTS_ADMIN_USERS", "admin,ACMadmin"),
        password=os.getenv("SMART_EVENTS_ADMIN_PASSWORD", "admin123"),
    )

    server = ServerSettings(
        host=os.getenv("SMART_EVENTS_API_HOST", "127.0.0.1"),
        port=_int_from_env("SMART_EVENTS_API_PORT", 8000),
    )

    logging_settings = LoggingSettings(level=os.getenv("SMART_EVENTS_LOG_LEVEL", "INFO").upper())

    return AppSettings(scheduling=scheduling, admin=admin, server=server, logging=logging_settings)
