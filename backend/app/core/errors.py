"""Render errors as {"error": message} the way the dashboard expects."""
import logging
from typing import Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.storage import StorageError

logger = logging.getLogger(__name__)

UPLOAD_FAILED = "Upload failed"
INTERNAL_ERROR = "Internal server error"


def first_validation_message(exc: Union[RequestValidationError, ValidationError]) -> str:
    """Human message of the first failing field; pydantic's "Value error, " prefix dropped."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    ctx = err.get("ctx") or {}
    if isinstance(ctx.get("error"), Exception):
        return str(ctx["error"])
    msg = err.get("msg") or "Invalid request"
    loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
    if err.get("type") == "missing" and loc:
        return f"{loc[-1]} is required"
    return msg


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = first_validation_message(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError):
        logger.error("Storage unavailable for %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": UPLOAD_FAILED})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
