"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AdminSettings, AppSettings, SchedulingSettings, ServerSettings, get_settings

__all__ = ["AdminSettings", "AppSettings", "SchedulingSettings", "ServerSettings", "get_settings"]
