"""RFC 7807 error responses.

Exports:
    ProblemDetails: Error response schema
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from src.presentation.routers.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = ["ErrorDetail", "ProblemDetails", "register_exception_handlers"]
