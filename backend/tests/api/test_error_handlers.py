"""Error Handlers: verifies exceptions become 500 problem documents without internals.

Tests:
    - Reading .value of a Failure -> 500 Result.ValueAccessOnFailure
    - A bind step returning a non-Result -> 500 Result.ContractViolation
    - Any other exception -> 500 Server.InternalError
    - No exception text reaches the client

Design Decisions:
    - raise_app_exceptions=False: Starlette re-raises catch-all exceptions after the
      handler has responded, the transport must not turn that into a test error
"""

import pytest
from httpx import ASGITransport, AsyncClient

from resultpattern.core.errors import Error
from resultpattern.core.result import Failure, Success


@pytest.fixture
async def faulty_client(app):
    @app.get("/boom/value")
    async def read_failed_value():
        return Failure(Error.failure("Secret.Code", "secret detail")).value

    @app.get("/boom/contract")
    async def broken_bind():
        return Success(1).bind(lambda v: v + 1)

    @app.get("/boom/crash")
    async def crash():
        raise RuntimeError("database password is hunter2")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.mark.parametrize("path, code", [
    ("/boom/value", "Result.ValueAccessOnFailure"),
    ("/boom/contract", "Result.ContractViolation"),
    ("/boom/crash", "Server.InternalError"),
])
async def test_exception_becomes_500_problem(faulty_client, path, code):
    res = await faulty_client.get(path)
    assert res.status_code == 500
    assert res.headers["content-type"].startswith("application/problem+json")
    body = res.json()
    assert body["title"] == "Internal Server Error"
    assert body["detail"] == "An unexpected error occurred"
    assert body["errorCode"] == code
    assert body["instance"] == f"GET {path}"


async def test_internal_details_not_leaked(faulty_client):
    for path in ("/boom/value", "/boom/crash"):
        text = (await faulty_client.get(path)).text
        assert "secret detail" not in text
        assert "hunter2" not in text
        assert "Traceback" not in text
