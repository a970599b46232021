"""Boundary Projection: verifies the kind -> status table and the problem document shape.

Tests:
    - Each ErrorKind maps to its fixed (status, title)
    - errorCode is a separate member; detail is the error description
    - instance/traceId/timestamp only appear when a request is supplied
    - Success projections: 200 JSON, empty 200 for no value, 201 + Location, 204
"""

import json

import pytest
from starlette.requests import Request

from resultpattern.api.problem_details import (
    PROBLEM_MEDIA_TYPE, build_problem, problem_details, status_for, title_for,
    to_api_response, to_created_response, to_no_content_response,
)
from resultpattern.core.errors import Error, ErrorKind
from resultpattern.core.result import Failure, Success

NOT_FOUND = Error.not_found("User.NotFound", "User with ID 9 was not found")


def _request(headers=None):
    raw = [(k.encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({
        "type": "http", "method": "GET", "path": "/api/users/9",
        "query_string": b"", "headers": raw,
    })


def _body(response):
    return json.loads(response.body)


# ─── Mapping table ───────────────────────────────────────────────

@pytest.mark.parametrize("kind, status, title", [
    (ErrorKind.NOT_FOUND, 404, "Resource Not Found"),
    (ErrorKind.VALIDATION, 400, "Validation Error"),
    (ErrorKind.CONFLICT, 409, "Conflict"),
    (ErrorKind.UNAUTHORIZED, 401, "Unauthorized"),
    (ErrorKind.FORBIDDEN, 403, "Forbidden"),
    (ErrorKind.FAILURE, 400, "Bad Request"),
])
def test_kind_maps_to_status_and_title(kind, status, title):
    assert status_for(kind) == status
    assert title_for(kind) == title
    problem = problem_details(Error("X.Code", "desc", kind))
    assert problem["status"] == status
    assert problem["title"] == title
    assert problem["type"] == f"https://httpstatuses.com/{status}"


def test_problem_carries_error_code_separately():
    problem = problem_details(NOT_FOUND)
    assert problem["errorCode"] == "User.NotFound"
    assert problem["detail"] == "User with ID 9 was not found"
    assert "User.NotFound" not in problem["detail"]


def test_problem_without_request_has_no_context():
    assert set(problem_details(NOT_FOUND)) == {"type", "title", "status", "detail", "errorCode"}


def test_problem_with_request_has_context():
    problem = problem_details(NOT_FOUND, _request({"x-request-id": "trace-1"}))
    assert problem["instance"] == "GET /api/users/9"
    assert problem["traceId"] == "trace-1"
    assert problem["timestamp"]


def test_trace_id_generated_when_header_missing():
    assert len(problem_details(NOT_FOUND, _request())["traceId"]) == 32


def test_build_problem_extensions():
    problem = build_problem(400, "Validation Error", "bad", "Request.Invalid", errors=[1])
    assert problem["errors"] == [1]


# ─── Projections ─────────────────────────────────────────────────

def test_failure_projects_problem_response():
    response = to_api_response(Failure(NOT_FOUND))
    assert response.status_code == 404
    assert response.media_type == PROBLEM_MEDIA_TYPE
    assert _body(response)["errorCode"] == "User.NotFound"


def test_success_projects_json():
    response = to_api_response(Success({"id": 1}))
    assert response.status_code == 200
    assert _body(response) == {"id": 1}


def test_no_value_success_has_empty_body():
    response = to_api_response(Success())
    assert response.status_code == 200
    assert response.body == b""


def test_created_response_sets_location():
    response = to_created_response(Success({"id": 4}), lambda v: f"/api/users/{v['id']}")
    assert response.status_code == 201
    assert response.headers["location"] == "/api/users/4"


def test_created_response_accepts_fixed_location():
    response = to_created_response(Success({"id": 4}), "/api/things")
    assert response.headers["location"] == "/api/things"


def test_created_response_failure_has_no_location():
    response = to_created_response(Failure(NOT_FOUND), "/api/things")
    assert response.status_code == 404
    assert "location" not in response.headers


def test_no_content_response():
    assert to_no_content_response(Success()).status_code == 204
    assert to_no_content_response(Failure(NOT_FOUND)).status_code == 404
