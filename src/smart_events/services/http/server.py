from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import orjson
from fastapi import FastAPI, Header, HTTPException, Response
from pydantic import BaseModel, Field

from ...api import api_state, call_api, get_api_functions

logger = logging.getLogger(__name__)

app = FastAPI(title="Smart Events Local API", version="0.3.0")


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


class SessionRequest(BaseModel):
    username: str
    password: str


def _json(payload: Any, status_code: int = 200) -> Response:
    return Response(content=orjson.dumps(payload), status_code=status_code, media_type="application/json")


@app.post("/api/session")
def open_session(request: SessionRequest) -> Response:
    token, role = api_state.context.auth.open_session(request.username, request.password)
    return _json({"token": token, "role": role.value})


@app.delete("/api/session")
def close_session(x_session_token: Optional[str] = Header(default=None)) -> Response:
    closed = api_state.context.auth.close_session(x_session_token)
    return _json({"closed": closed})


@app.get("/api/functions")
def list_api_functions(x_session_token: Optional[str] = Header(default=None)) -> Response:
    role = api_state.context.auth.role_for(x_session_token)
    functions = [func.describe() for func in get_api_functions(role)]
    return _json({"role": role.value, "functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(
    function_name: str,
    request: ApiCallRequest,
    x_session_token: Optional[str] = Header(default=None),
) -> Response:
    role = api_state.context.auth.role_for(x_session_token)
    try:
        result = call_api(function_name, role=role, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PermissionError as exc:
        logger.warning("API function %s refused for role %s", function_name, role.value)
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return _json({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Smart Events API on %s:%d", host, port)
    asyncio.run(serve(app, config))
