"""
Global Exception Handlers for the FastAPI Application.

ORM errors that reach the web layer are mapped to JSON responses:

- ``IntegrityError`` (foreign key or constraint violation) -> 409
- ``MultipleResultsFound`` (a "fetch one" query matched several rows) -> 409
- ``InvalidQueryParameter`` raised while building a query (bad ordering/pagination) -> 422
- anything else -> 500 with an error ID, logged with the request context
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, MultipleResultsFound

from querylab.core.database.errors import InvalidQueryParameter
from querylab.core.logging_config import get_logger

logger = get_logger(__name__)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Answer 409 when the database rejects a write."""
    logger.warning(f"Integrity error in {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": "Database constraint violated",
            "error_type": type(exc).__name__,
        },
    )


async def multiple_results_handler(request: Request, exc: MultipleResultsFound) -> JSONResponse:
    """Answer 409 when a single-row query matched several rows."""
    logger.warning(f"Non-unique result in {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": "More than one row matched a query expecting a single result",
            "error_type": type(exc).__name__,
        },
    )


async def invalid_query_handler(request: Request, exc: InvalidQueryParameter) -> JSONResponse:
    """Answer 422 when query parameters cannot be turned into a query."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(MultipleResultsFound, multiple_results_handler)
    app.add_exception_handler(InvalidQueryParameter, invalid_query_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
