"""Combinator Library: free-function composition over Result, sync and async.

Invariants:
    - Every combinator dispatches on the variant; none unwraps without knowing the state
    - First failure wins: bind/map never call their function on a Failure
    - try_/try_async are the only places an exception becomes a Failure; only the
      operation itself is guarded, so a ResultContractError from wrapping its value
      propagates
    - combine and the async combinators raise ResultContractError for a non-Result
      input, as bind does for a non-Result step
    - Async variants accept a Result or an awaitable of one, and sync or async callbacks;
      a step never starts before the previous step has resolved

Design Decisions:
    - Free functions mirror the fluent methods on Success/Failure so pipelines can be
      written either way; async forms exist only here (methods stay synchronous)
    - try_ catches Exception, not BaseException: cancellation and interpreter exit
      keep propagating
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from resultpattern.core.errors import Error, ResultContractError
from resultpattern.core.result import Failure, Result, Success, _ensure_result, is_result

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

ErrorHandler = Callable[[Exception], "Error | None"]


# ─── Sync ────────────────────────────────────────────────────────

def map_(result: Result[T], mapper: Callable[[T], U]) -> Result[U]:
    return result.map(mapper)


def bind(result: Result[T], binder: Callable[[T], Result[U]]) -> Result[U]:
    return result.bind(binder)


def tap(result: Result[T], action: Callable[[T], Any]) -> Result[T]:
    return result.tap(action)


def tap_error(result: Result[T], action: Callable[[Error], Any]) -> Result[T]:
    return result.tap_error(action)


def ensure(
    result: Result[T], predicate: Callable[[T], bool], error: Error,
) -> Result[T]:
    return result.ensure(predicate, error)


def to_result(result: Result[Any], value: U) -> Result[U]:
    """Attach a value to a (typically no-value) result, keeping any failure."""
    return result.to_result(value)


def match(
    result: Result[T],
    on_success: Callable[[T], R],
    on_failure: Callable[[Error], R],
) -> R:
    return result.match(on_success, on_failure)


def combine(first: Result[Any], second: Result[Any], *rest: Result[Any]) -> Result[tuple]:
    """Success with a tuple of all values, or the failure of the leftmost failed result."""
    values = []
    for result in (first, second, *rest):
        match result:
            case Failure(error):
                return Failure(error)
            case Success(value):
                values.append(value)
            case _:
                raise _not_a_result(result, "combine")
    return Success(tuple(values))


def try_(
    operation: Callable[[], T], error_handler: ErrorHandler | None = None,
) -> Result[T]:
    """Run operation, converting any raised Exception into a Failure."""
    try:
        value = operation()
    except Exception as exc:
        return Failure(_error_from_exception(exc, error_handler))
    return Success(value)


# ─── Async ───────────────────────────────────────────────────────

async def map_async(
    result: Result[T] | Awaitable[Result[T]],
    mapper: Callable[[T], U | Awaitable[U]],
) -> Result[U]:
    match await _resolve(result, "map_async"):
        case Success(value):
            return Success(await _call(mapper, value))
        case Failure(error):
            return Failure(error)


async def bind_async(
    result: Result[T] | Awaitable[Result[T]],
    binder: Callable[[T], Result[U] | Awaitable[Result[U]]],
) -> Result[U]:
    match await _resolve(result, "bind_async"):
        case Success(value):
            return _ensure_result(await _call(binder, value), binder)
        case Failure(error):
            return Failure(error)


async def tap_async(
    result: Result[T] | Awaitable[Result[T]],
    action: Callable[[T], Any],
) -> Result[T]:
    resolved = await _resolve(result, "tap_async")
    if isinstance(resolved, Success):
        await _call(action, resolved.value)
    return resolved


async def match_async(
    result: Result[T] | Awaitable[Result[T]],
    on_success: Callable[[T], R | Awaitable[R]],
    on_failure: Callable[[Error], R | Awaitable[R]],
) -> R:
    match await _resolve(result, "match_async"):
        case Success(value):
            return await _call(on_success, value)
        case Failure(error):
            return await _call(on_failure, error)


async def try_async(
    operation: Callable[[], Awaitable[T]],
    error_handler: ErrorHandler | None = None,
) -> Result[T]:
    try:
        value = await _call(operation)
    except Exception as exc:
        return Failure(_error_from_exception(exc, error_handler))
    return Success(value)


# ─── Helpers ─────────────────────────────────────────────────────

def _error_from_exception(exc: Exception, error_handler: ErrorHandler | None) -> Error:
    """Handler result, or the generic "Exception" error if there is none or it raises."""
    error = None
    if error_handler is not None:
        try:
            error = error_handler(exc)
        except Exception as handler_exc:
            logger.warning(
                f"error_handler raised {type(handler_exc).__name__} while handling "
                f"{type(exc).__name__}; using the generic Exception error",
                exc_info=handler_exc,
            )
    if error is None:
        error = Error.failure("Exception", str(exc) or type(exc).__name__)
    return error


async def _resolve(result: Any, combinator: str) -> Result[Any]:
    if inspect.isawaitable(result):
        result = await result
    if not is_result(result):
        raise _not_a_result(result, combinator)
    return result


def _not_a_result(obj: Any, combinator: str) -> ResultContractError:
    return ResultContractError(
        f"{combinator} received {type(obj).__name__}, expected a Result"
    )


async def _call(func: Callable, *args: Any) -> Any:
    out = func(*args)
    if inspect.isawaitable(out):
        return await out
    return out
