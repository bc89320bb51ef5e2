"""Exception handlers that turn errors into JSON error bodies.

Every error body has the same shape:

    {"error": "Validation Error", "message": "...", "_links": {"collection": "/api/v1/players"}}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..config.settings import settings
from ..core.exceptions import (
    BusinessLogicError,
    ConflictError,
    DocumentValidationError,
    InvalidQueryError,
    InvalidReferenceError,
    LFCError,
    ResourceNotFoundError,
)
from ..services.base import format_validation_errors

logger = logging.getLogger(__name__)

# Exception class -> (HTTP status, error title)
ERROR_STATUS: dict[type[LFCError], tuple[int, str]] = {
    DocumentValidationError: (400, "Validation Error"),
    BusinessLogicError: (400, "BusinessLogicError"),
    InvalidReferenceError: (400, "Invalid Reference"),
    InvalidQueryError: (400, "Invalid Query"),
    ResourceNotFoundError: (404, "Not Found"),
    ConflictError: (409, "Conflict"),
}


def error_links(request: Request) -> dict:
    """Point the client back at the collection the failed request was aimed at."""
    path = request.url.path
    if not path.startswith(settings.api_prefix):
        return {"root": "/"}
    segments = [segment for segment in path[len(settings.api_prefix):].split("/") if segment]
    if not segments:
        return {"root": "/"}
    return {"collection": f"{settings.api_prefix}/{segments[0]}"}


def error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "_links": error_links(request)},
    )


async def lfc_error_handler(request: Request, exc: LFCError) -> JSONResponse:
    status_code, title = 500, "Internal Server Error"
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_STATUS:
            status_code, title = ERROR_STATUS[exc_type]
            break
    if isinstance(exc, ResourceNotFoundError):
        title = str(exc)  # "Player not found"
    return error_response(request, status_code, title, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map FastAPI's 422 into the 400 responses clients of this API expect."""
    errors = exc.errors()

    bad_path = [error for error in errors if error.get("loc", ("",))[0] == "path"]
    if bad_path:
        name = str(bad_path[0]["loc"][-1])
        value = bad_path[0].get("input")
        if name.endswith("_id"):
            return error_response(request, 400, "Invalid ID Format", f"'{value}' is not a valid id")
        return error_response(
            request, 400, "Invalid Path Parameter", f"'{value}' is not a valid {name}"
        )

    extra = [error for error in errors if error.get("type") == "extra_forbidden"]
    if extra:
        fields = sorted({".".join(str(part) for part in error["loc"][1:]) for error in extra})
        return error_response(request, 400, "Invalid fields", f"Fields not allowed: {', '.join(fields)}")

    return error_response(request, 400, "Validation Error", format_validation_errors(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, 500, "Internal Server Error", "An unexpected error occurred")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LFCError, lfc_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
