"""Global exception handlers for FastAPI application.

Converts exceptions into RFC 7807 Problem Details responses.

Handlers:
    http_exception_handler: HTTPException (404, 405, ...)
    validation_exception_handler: RequestValidationError
    streaming_unsupported_handler: StreamingUnsupportedError (500, before streaming)
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.domain.errors import StreamingUnsupportedError
from src.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _get_status_info(status_code: int) -> tuple[str, str]:
    """Get (title, slug) for an HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _problem_response(
    request: Request,
    *,
    status_code: int,
    title: str,
    slug: str,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    problem = ProblemDetails(
        type=f"/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to a Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing or a handler.

    Returns:
        JSONResponse with ProblemDetails and any headers from the exception.
    """
    assert isinstance(exc, StarletteHTTPException)

    title, slug = _get_status_info(exc.status_code)
    return _problem_response(
        request,
        status_code=exc.status_code,
        title=title,
        slug=slug,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to a Problem Details response.

    Stream parameters are normalized rather than validated, so this only
    fires for malformed requests outside the stream contract.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors = [
        ErrorDetail(
            field=".".join(str(p) for p in error.get("loc", [])) or "unknown",
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]
    return _problem_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        title="Validation Failed",
        slug="validation-failed",
        detail="Request validation failed. Check 'errors' for details.",
        errors=field_errors or None,
    )


async def streaming_unsupported_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Reject a stream request whose transport cannot flush.

    Raised before the response starts, so the client receives a normal
    500 response instead of a stream.
    """
    assert isinstance(exc, StreamingUnsupportedError)

    get_logger().error(
        "Streaming unsupported",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
    )
    return _problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Streaming Unsupported",
        slug="streaming-unsupported",
        detail=exc.message,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a 500 without leaking internals.
    """
    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        slug="internal-server-error",
        detail="An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StreamingUnsupportedError, streaming_unsupported_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
