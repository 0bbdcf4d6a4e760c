"""
FastAPI application entry point for the todo backend.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException

from mdtodo.config import get_settings
from mdtodo.db import RepositoryError
from mdtodo.routes import router
from mdtodo.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, message: str, headers: dict | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.fail(message).model_dump(mode="json"),
        headers=headers,
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


async def _http_exception_handler(request: Request, exc: HTTPException):
    return _error_response(exc.status_code, str(exc.detail), exc.headers)


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(400, _describe_validation_error(exc))


async def _repository_exception_handler(request: Request, exc: RepositoryError):
    logger.exception(
        "Repository failure on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(500, "Internal server error")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="MD-Todo Backend",
        version="0.1.0",
        openapi_url="/api-docs/openapi.json",
        docs_url="/swagger-ui",
        redoc_url=None,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RepositoryError, _repository_exception_handler)

    @app.get("/health", response_class=PlainTextResponse)
    def health_check() -> str:
        return "OK"

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
