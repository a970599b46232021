"""Error Handlers: global exception handlers, all answering with problem documents.

Invariants:
    - RequestValidationError -> 400 with field-level details (errorCode Request.Invalid)
    - ValueAccessOnFailureError -> 500, logged with traceback: it is a programming error
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: framework validation, Result contract violation, catch-all
    - Domain failures never reach these handlers: they are Results, projected by routes
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from resultpattern.api.problem_details import build_problem, problem_response
from resultpattern.core.errors import ResultContractError, ValueAccessOnFailureError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_result_contract_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed body, query or path parameter."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "Request.Invalid"},
        )
        return problem_response(build_problem(
            status.HTTP_400_BAD_REQUEST, "Validation Error", "Invalid request data",
            "Request.Invalid", request, errors=_field_errors(exc),
        ))


def _register_result_contract_handler(app: FastAPI) -> None:

    @app.exception_handler(ValueAccessOnFailureError)
    async def value_access_handler(request: Request, exc: ValueAccessOnFailureError):
        """A route read .value on a Failure without checking it."""
        logger.error(
            f"Result value accessed on failure at {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "error_code": exc.code},
        )
        return _internal_error(request, "Result.ValueAccessOnFailure")

    @app.exception_handler(ResultContractError)
    async def result_contract_handler(request: Request, exc: ResultContractError):
        logger.error(
            f"Result contract violated at {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return _internal_error(request, "Result.ContractViolation")


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return _internal_error(request, "Server.InternalError")


def _internal_error(request: Request, error_code: str):
    return problem_response(build_problem(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error",
        "An unexpected error occurred", error_code, request,
    ))


def _field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
