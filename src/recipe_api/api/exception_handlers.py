"""
recipe_api.api.exception_handlers

Translate service errors into HTTP responses.

Responsibilities:
- Map each `RecipeApiError` subclass to one status code.
- Log mapped errors with request context.

Error body:
    {"detail": "<message>", "code": "<MACHINE_CODE>"}
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from recipe_api.errors import (
    AuthorizationDeniedError,
    ConflictError,
    NotFoundError,
    RecipeApiError,
)
from recipe_api.observability.logging import get_logger

log = get_logger(__name__)

ERROR_STATUS: dict[type[RecipeApiError], int] = {
    NotFoundError: HTTP_404_NOT_FOUND,
    AuthorizationDeniedError: HTTP_403_FORBIDDEN,
    ConflictError: HTTP_409_CONFLICT,
}


def status_for(exc: RecipeApiError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return HTTP_400_BAD_REQUEST


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecipeApiError)
    async def recipe_api_error_handler(request: Request, exc: RecipeApiError) -> JSONResponse:
        status_code = status_for(exc)
        log.warning("request_failed", status_code=status_code, code=exc.code, detail=exc.message)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": exc.code},
        )
