"""Text user interface."""

from __future__ import annotations

from .menu import EventMenu, run_menu

__all__ = ["EventMenu", "run_menu"]
