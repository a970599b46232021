"""Error Model: immutable, kind-tagged error values plus the programmer-error exceptions.

Invariants:
    - Every Error has a code (stable, machine-readable), a description and an ErrorKind
    - The kind is a field on the value: the boundary never needs the construction call site
    - NO_ERROR is only ever the `error` of a Success; it never reaches a response
    - Errors are frozen: no combinator or handler can rewrite a code after creation

Design Decisions:
    - One dataclass tagged by ErrorKind instead of NotFoundError/ValidationError subclasses:
      the boundary switches on a closed enum (ADR: tagged variant over type hierarchy)
    - Exceptions exist only for contract violations (bad construction, value access on
      failure); expected outcomes are Error values
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of error categories that drive response shape."""
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class Error:
    """An expected failure outcome."""

    code: str
    description: str
    kind: ErrorKind = ErrorKind.FAILURE

    @classmethod
    def not_found(cls, code: str, description: str) -> "Error":
        return cls(code, description, ErrorKind.NOT_FOUND)

    @classmethod
    def validation(cls, code: str, description: str) -> "Error":
        return cls(code, description, ErrorKind.VALIDATION)

    @classmethod
    def conflict(cls, code: str, description: str) -> "Error":
        return cls(code, description, ErrorKind.CONFLICT)

    @classmethod
    def unauthorized(cls, code: str, description: str) -> "Error":
        return cls(code, description, ErrorKind.UNAUTHORIZED)

    @classmethod
    def forbidden(cls, code: str, description: str) -> "Error":
        return cls(code, description, ErrorKind.FORBIDDEN)

    @classmethod
    def failure(cls, code: str, description: str) -> "Error":
        """Generic failure, also the kind used for caught exceptions."""
        return cls(code, description, ErrorKind.FAILURE)

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Sentinel for the success branch. Compared by value, like any Error.
NO_ERROR = Error("", "")

NULL_VALUE = Error.failure("Null", "Value cannot be null")


# ─── Contract Violations ─────────────────────────────────────────

class ResultContractError(ValueError):
    """A Result was constructed in a state that breaks success-XOR-error."""


class ValueAccessOnFailureError(RuntimeError):
    """`.value` was read on a Failure. Callers must check state or use combinators."""

    def __init__(self, error: Error):
        super().__init__(
            "Cannot access value of a failed result. "
            f"Error: {error.code} - {error.description}"
        )
        self.code = error.code
        self.description = error.description
        self.error = error
