"""FastAPI application for the todo API.

Wires the todo router under the versioned prefix and installs the HTTP
middleware stack:

- ``request_id_middleware`` tags every log record with the request id and
  renders unhandled errors as 500 responses
- ``token_auth_middleware`` rejects API calls without a valid ``token`` query
  parameter before any body parsing or handler logic runs
- API errors are rendered as ``{"error": ..., "message": ...}``
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api.routes import router as todos_router
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .repositories.todo_repository import SEED_TODOS, TodoRepository
from .security import is_invalid_token
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def error_body(status_code: int, message: str) -> dict[str, str]:
    try:
        kind = HTTPStatus(status_code).phrase.lower().replace(" ", "_")
    except ValueError:
        kind = "error"
    if status_code == status.HTTP_400_BAD_REQUEST:
        kind = "invalid_input"
    return {"error": kind, "message": message}


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if repository is None:
        repository = TodoRepository(SEED_TODOS if settings.seed_todos else ())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting Todo API (prefix=%s, todos=%d)",
            settings.api_prefix,
            len(repository),
        )
        yield
        logger.info("Shutting down Todo API...")

    app = FastAPI(
        title="Todo API",
        description="A simple in-memory todo API with token authentication",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.todo_repository = repository

    def _is_api_request(request: Request) -> bool:
        path = request.url.path
        return path == settings.api_prefix or path.startswith(settings.api_prefix + "/")

    @app.exception_handler(StarletteHTTPException)
    async def api_http_exception_handler(request: Request, exc: StarletteHTTPException):
        if _is_api_request(request):
            message = exc.detail if isinstance(exc.detail, str) else "Request failed"
            return JSONResponse(
                status_code=exc.status_code,
                content=error_body(exc.status_code, message),
                headers=getattr(exc, "headers", None),
            )
        return await http_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def api_validation_exception_handler(request: Request, exc: RequestValidationError):
        if _is_api_request(request):
            message = "Invalid input"
            errors = exc.errors()
            if errors:
                first = errors[0]
                location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
                message = first.get("msg", message)
                if location:
                    message = f"{location}: {message}"
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=error_body(status.HTTP_400_BAD_REQUEST, message),
            )
        return await request_validation_exception_handler(request, exc)

    @app.middleware("http")
    async def token_auth_middleware(request: Request, call_next):
        if _is_api_request(request) and is_invalid_token(
            request.query_params.get("token"), settings.token
        ):
            logger.warning("Rejected %s %s: invalid token", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=error_body(status.HTTP_401_UNAUTHORIZED, "Invalid token"),
            )
        return await call_next(request)

    # Registered last so it wraps the token check and its log lines.
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
            )
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(todos_router, prefix=settings.api_prefix)

    # Outside the documented API surface and not token protected.
    @app.get("/ping", include_in_schema=False)
    def ping() -> dict[str, str]:
        return {"message": "pong"}

    return app


app = create_app()
