"""Result Core: a two-variant outcome type, Success (optional value) or Failure (Error).

Invariants:
    - Exactly one of Success / Failure; `is_success` and `is_failure` are always opposite
    - Success never carries an Error as its value; Failure never carries NO_ERROR
    - Failure.value raises ValueAccessOnFailureError (fails fast, never a silent default)
    - Results are frozen: every combinator returns a Result, inputs are never mutated
    - A failure keeps its original Error instance through map/bind/to_result at any depth

Design Decisions:
    - Tagged union of two frozen dataclasses instead of one class with an is_success flag:
      each variant implements its own branch, so combinators never inspect state
      (ADR: total by construction)
    - Success() with no argument is the no-value result (value is None)
    - as_result() replaces implicit conversions: Error -> Failure, None -> Failure(NULL_VALUE)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from resultpattern.core.errors import (
    NO_ERROR, NULL_VALUE, Error, ResultContractError, ValueAccessOnFailureError,
)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome, optionally carrying a value."""

    value: T = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if isinstance(self.value, Error):
            raise ResultContractError("Success result cannot have an error")

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> Error:
        return NO_ERROR

    def map(self, mapper: Callable[[T], U]) -> "Result[U]":
        return Success(mapper(self.value))

    def bind(self, binder: Callable[[T], "Result[U]"]) -> "Result[U]":
        return _ensure_result(binder(self.value), binder)

    def tap(self, action: Callable[[T], Any]) -> "Result[T]":
        action(self.value)
        return self

    def tap_error(self, action: Callable[[Error], Any]) -> "Result[T]":
        return self

    def ensure(self, predicate: Callable[[T], bool], error: Error) -> "Result[T]":
        return self if predicate(self.value) else Failure(error)

    def to_result(self, value: U) -> "Result[U]":
        return Success(value)

    def match(
        self, on_success: Callable[[T], R], on_failure: Callable[[Error], R],
    ) -> R:
        return on_success(self.value)


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome carrying a real Error."""

    error: Error

    def __post_init__(self) -> None:
        if not isinstance(self.error, Error):
            raise ResultContractError(
                f"Failure result must carry an Error, got {type(self.error).__name__}"
            )
        if self.error == NO_ERROR:
            raise ResultContractError("Failure result must have an error")

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> Any:
        raise ValueAccessOnFailureError(self.error)

    def map(self, mapper: Callable[[Any], Any]) -> "Failure":
        return Failure(self.error)

    def bind(self, binder: Callable[[Any], Any]) -> "Failure":
        return Failure(self.error)

    def tap(self, action: Callable[[Any], Any]) -> "Failure":
        return self

    def tap_error(self, action: Callable[[Error], Any]) -> "Failure":
        action(self.error)
        return self

    def ensure(self, predicate: Callable[[Any], bool], error: Error) -> "Failure":
        return self

    def to_result(self, value: Any) -> "Failure":
        return Failure(self.error)

    def match(
        self, on_success: Callable[[Any], R], on_failure: Callable[[Error], R],
    ) -> R:
        return on_failure(self.error)


Result = Union[Success[T], Failure]


def is_result(obj: object) -> bool:
    return isinstance(obj, (Success, Failure))


def as_result(obj: Any) -> "Result[Any]":
    """Lift a bare value or Error into a Result.

    An Error becomes a Failure, None becomes Failure(NULL_VALUE), an existing
    Result is returned unchanged, anything else becomes Success(obj).
    """
    if is_result(obj):
        return obj
    if isinstance(obj, Error):
        return Failure(obj)
    if obj is None:
        return Failure(NULL_VALUE)
    return Success(obj)


def _ensure_result(out: Any, binder: Callable) -> "Result[Any]":
    if not is_result(out):
        name = getattr(binder, "__qualname__", repr(binder))
        raise ResultContractError(
            f"bind step {name} returned {type(out).__name__}, expected a Result"
        )
    return out
