"""Boundary Projection: terminal Result -> FastAPI response, failures as problem documents.

Invariants:
    - ErrorKind -> (status, title) is fixed by _STATUS_BY_KIND/_TITLE_BY_KIND; changing a row
      is a breaking API change
    - FAILURE (and any unmapped kind) falls back to 400 "Bad Request"
    - Every problem document carries type, title, status, detail and errorCode;
      errorCode is its own field, never embedded in detail
    - Problem documents never contain exception text or tracebacks
    - Success(None) renders as an empty body; any other value is JSON-encoded

Design Decisions:
    - RFC 7807 `application/problem+json` over the ad-hoc {"error": {...}} envelope:
      one machine-parsable shape for every failure, domain or framework
    - request is optional: with it the document also gets instance/traceId/timestamp
"""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from resultpattern.core.errors import Error, ErrorKind
from resultpattern.core.result import Failure, Result, Success

PROBLEM_MEDIA_TYPE = "application/problem+json"
TRACE_HEADER = "x-request-id"

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.FAILURE: status.HTTP_400_BAD_REQUEST,
}

_TITLE_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "Resource Not Found",
    ErrorKind.VALIDATION: "Validation Error",
    ErrorKind.CONFLICT: "Conflict",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.FAILURE: "Bad Request",
}


def status_for(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND.get(kind, status.HTTP_400_BAD_REQUEST)


def title_for(kind: ErrorKind) -> str:
    return _TITLE_BY_KIND.get(kind, "Bad Request")


# ─── Problem documents ───────────────────────────────────────────

def build_problem(
    status_code: int,
    title: str,
    detail: str,
    error_code: str,
    request: Request | None = None,
    **extensions: Any,
) -> dict:
    """Assemble an RFC 7807 document. Extra keyword arguments become extension members."""
    problem = {
        "type": f"https://httpstatuses.com/{status_code}",
        "title": title,
        "status": status_code,
        "detail": detail,
        "errorCode": error_code,
    }
    if request is not None:
        problem.update(request_context(request))
    problem.update(extensions)
    return problem


def problem_details(error: Error, request: Request | None = None) -> dict:
    """Problem document for a domain Error, status and title derived from its kind."""
    return build_problem(
        status_for(error.kind), title_for(error.kind),
        error.description, error.code, request,
    )


def request_context(request: Request) -> dict:
    return {
        "instance": f"{request.method} {request.url.path}",
        "traceId": request.headers.get(TRACE_HEADER) or uuid4().hex,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def problem_response(problem: dict) -> JSONResponse:
    return JSONResponse(
        content=problem, status_code=problem["status"], media_type=PROBLEM_MEDIA_TYPE,
    )


# ─── Result projections ──────────────────────────────────────────

def to_error_response(error: Error, request: Request | None = None) -> JSONResponse:
    return problem_response(problem_details(error, request))


def to_api_response(result: Result[Any], request: Request | None = None) -> Response:
    """200 with the value (empty body for a no-value success), or a problem document."""
    match result:
        case Failure(error):
            return to_error_response(error, request)
        case Success(None):
            return Response(status_code=status.HTTP_200_OK)
        case Success(value):
            return JSONResponse(content=jsonable_encoder(value))


def to_created_response(
    result: Result[Any],
    location: str | Callable[[Any], str],
    request: Request | None = None,
) -> Response:
    """201 with the value and a Location header, or a problem document."""
    match result:
        case Failure(error):
            return to_error_response(error, request)
        case Success(value):
            uri = location(value) if callable(location) else location
            return JSONResponse(
                content=jsonable_encoder(value),
                status_code=status.HTTP_201_CREATED,
                headers={"Location": uri},
            )


def to_no_content_response(result: Result[Any], request: Request | None = None) -> Response:
    match result:
        case Failure(error):
            return to_error_response(error, request)
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
