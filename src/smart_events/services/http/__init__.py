"""HTTP services for Smart Events."""

from .server import app, close_session, invoke_api_function, list_api_functions, open_session, run_local_server

__all__ = [
    "app",
    "close_session",
    "invoke_api_function",
    "list_api_functions",
    "open_session",
    "run_local_server",
]
