from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import get_settings
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Smart Events command line interface.")
    parser.add_argument("--log-level", default=settings.logging.level, help="Root log level (default: %(default)s).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("menu", help="Run the interactive event menu.")

    api_parser = subparsers.add_parser("api", help="Start the HTTP server exposing the registered functions.")
    api_parser.add_argument("--host", default=settings.server.host)
    api_parser.add_argument("--port", type=int, default=settings.server.port)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    # The menu owns the terminal, so log lines go to the file only.
    configure_logging(args.log_level, console=args.command != "menu")
    logging.getLogger(__name__).info("Smart Events CLI starting (%s)", args.command)

    if args.command == "menu":
        from .ui import run_menu

        run_menu()
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
