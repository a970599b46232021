"""Combinators: verifies short-circuiting, side-effect placement and error identity.

Tests:
    - bind: first failure wins, the binder never runs on a Failure
    - map: Failure passes through untouched, mapper never runs
    - tap / tap_error: run only on Success / only on Failure, return the original result
    - ensure: predicate only evaluated on Success
    - combine: first-argument failure has priority
    - try_: exceptions become Failure (handler or generic "Exception" code);
      returning an Error is a contract violation, not a Failure
    - combine rejects non-Result arguments
    - Error instances survive arbitrarily deep chains
"""

import pytest

from resultpattern.core.combinators import (
    bind, combine, ensure, map_, match, tap, tap_error, to_result, try_,
)
from resultpattern.core.errors import Error, ErrorKind, ResultContractError
from resultpattern.core.result import Failure, Success

E1 = Error.validation("Test.First", "first failure")
E2 = Error.conflict("Test.Second", "second failure")


def _never(*_):
    raise AssertionError("callback must not run")


# ─── bind ────────────────────────────────────────────────────────

def test_bind_returns_binder_result_on_success():
    assert bind(Success(2), lambda v: Success(v * 10)) == Success(20)


def test_bind_returns_binder_failure():
    result = bind(Success(2), lambda _: Failure(E2))
    assert result.is_failure
    assert result.error is E2


def test_bind_short_circuits_on_failure():
    result = bind(Failure(E1), _never)
    assert result.error is E1


def test_first_failure_in_chain_wins():
    calls = []

    def step(name, outcome):
        def run(value):
            calls.append(name)
            return outcome(value)
        return run

    result = (
        Success(1)
        .bind(step("a", lambda v: Success(v + 1)))
        .bind(step("b", lambda _: Failure(E1)))
        .bind(step("c", lambda _: Failure(E2)))
        .bind(step("d", lambda v: Success(v)))
    )
    assert calls == ["a", "b"]
    assert result.error is E1


def test_error_identity_survives_deep_chain():
    result = Failure(E1)
    for _ in range(50):
        result = result.map(lambda v: v).bind(lambda v: Success(v)).to_result(0)
    assert result.error is E1
    assert result.error.code == "Test.First"
    assert result.error.kind is ErrorKind.VALIDATION


def test_bind_rejects_non_result_return():
    with pytest.raises(ResultContractError):
        Success(1).bind(lambda v: v + 1)


# ─── map ─────────────────────────────────────────────────────────

def test_map_transforms_value_and_type():
    assert map_(Success(3), str) == Success("3")


def test_map_passes_failure_unchanged():
    result = map_(Failure(E1), _never)
    assert result == Failure(E1)
    assert result.error is E1


def test_map_does_not_mutate_input():
    original = Success([1, 2])
    mapped = original.map(lambda xs: xs + [3])
    assert original.value == [1, 2]
    assert mapped.value == [1, 2, 3]


# ─── tap / tap_error ─────────────────────────────────────────────

def test_tap_runs_once_on_success():
    counter = {"n": 0}
    original = Success("x")
    result = tap(original, lambda _: counter.__setitem__("n", counter["n"] + 1))
    assert counter["n"] == 1
    assert result is original


def test_tap_skipped_on_failure():
    counter = {"n": 0}
    original = Failure(E1)
    result = tap(original, lambda _: counter.__setitem__("n", counter["n"] + 1))
    assert counter["n"] == 0
    assert result is original


def test_tap_discards_callback_return_value():
    assert Success(1).tap(lambda v: "ignored") == Success(1)


def test_tap_error_runs_only_on_failure():
    seen = []
    Success(1).tap_error(seen.append)
    failure = Failure(E1)
    result = tap_error(failure, seen.append)
    assert seen == [E1]
    assert result is failure


# ─── ensure ──────────────────────────────────────────────────────

def test_ensure_keeps_success_when_predicate_holds():
    assert ensure(Success(5), lambda x: x > 0, E1) == Success(5)


def test_ensure_fails_when_predicate_false():
    result = ensure(Success(-1), lambda x: x > 0, E1)
    assert result.is_failure
    assert result.error is E1


def test_ensure_skips_predicate_on_failure():
    result = ensure(Failure(E2), _never, E1)
    assert result.error is E2


# ─── combine ─────────────────────────────────────────────────────

def test_combine_returns_pair_when_both_succeed():
    assert combine(Success(1), Success("a")) == Success((1, "a"))


def test_combine_prefers_first_failure():
    assert combine(Failure(E1), Failure(E2)).error is E1


def test_combine_returns_second_failure_when_first_succeeds():
    assert combine(Success(1), Failure(E2)).error is E2


def test_combine_accepts_more_than_two():
    assert combine(Success(1), Success(2), Success(3)) == Success((1, 2, 3))
    assert combine(Success(1), Success(2), Failure(E2)).error is E2


def test_combine_rejects_non_result():
    with pytest.raises(ResultContractError):
        combine(Success(1), "plain value")


# ─── try_ ────────────────────────────────────────────────────────

def test_try_wraps_return_value():
    assert try_(lambda: 7) == Success(7)


def test_try_converts_exception_to_generic_failure():
    def boom():
        raise ValueError("bad input")

    result = try_(boom)
    assert result.is_failure
    assert result.error.code == "Exception"
    assert result.error.description == "bad input"
    assert result.error.kind is ErrorKind.FAILURE


def test_try_uses_error_handler():
    def boom():
        raise KeyError("k")

    result = try_(boom, lambda exc: Error.not_found("Lookup.Missing", type(exc).__name__))
    assert result.error == Error.not_found("Lookup.Missing", "KeyError")


def test_try_falls_back_when_handler_returns_none():
    def boom():
        raise RuntimeError("oops")

    assert try_(boom, lambda _: None).error.code == "Exception"


def test_try_uses_exception_type_when_message_empty():
    def boom():
        raise ValueError()

    assert try_(boom).error.description == "ValueError"


def test_try_operation_returning_error_raises_contract_error():
    with pytest.raises(ResultContractError):
        try_(lambda: Error.not_found("Thing.Missing", "gone"))


def test_try_falls_back_when_handler_raises():
    def boom():
        raise ValueError("bad input")

    def broken_handler(exc):
        raise KeyError("handler")

    result = try_(boom, broken_handler)
    assert result.error == Error.failure("Exception", "bad input")


def test_try_does_not_swallow_base_exceptions():
    def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        try_(interrupt)


# ─── match / to_result ───────────────────────────────────────────

def test_match_calls_exactly_one_handler():
    assert match(Success(2), lambda v: v * 2, _never) == 4
    assert match(Failure(E1), _never, lambda e: e.code) == "Test.First"


def test_match_on_no_value_success_passes_none():
    assert Success().match(lambda v: v is None, _never) is True


def test_to_result_attaches_value():
    assert to_result(Success(), "payload") == Success("payload")
    assert to_result(Failure(E1), "payload").error is E1
