"""Error payloads and exception handlers shared by every router.

All error bodies use the {"error": ..., "message": ...} shape the dashboard
expects instead of FastAPI's default {"detail": ...}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR = "Erreur serveur"

# Sent on preflight answers and on 500s rendered outside CORSMiddleware
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

_STATUS_ERRORS = {
    404: "Not found",
    405: "Method not allowed",
}


def server_error(exc: Exception, error: str = SERVER_ERROR, **extra) -> JSONResponse:
    """500 response for an unexpected exception caught at a handler boundary."""
    return JSONResponse(
        status_code=500,
        content={**extra, "error": error, "message": str(exc)},
    )


def bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Bad request", "message": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = _STATUS_ERRORS.get(exc.status_code, str(exc.detail))
    content = {"error": error}
    if exc.status_code not in _STATUS_ERRORS and exc.detail:
        content["message"] = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "message": str(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    response = server_error(exc)
    response.headers.update(CORS_HEADERS)
    return response


def install_exception_handlers(app: FastAPI) -> None:
    """Register the error-shaping handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
