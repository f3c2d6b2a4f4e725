"""Smart Events: an in-memory scheduling assistant."""

from __future__ import annotations

from .core import EventStore

__all__ = ["EventStore", "main"]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
