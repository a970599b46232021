"""User Service: lookups and validated create/update/delete, all returning Results.

Invariants:
    - No method raises for an expected outcome: not found, invalid input and duplicate
      email come back as Failure with a UserErrors code
    - Emails are stored lower-cased and compared case-insensitively
    - update() validates every provided field before applying any of them
    - A failed create never consumes a user id

Design Decisions:
    - Field checks are small Result-returning functions chained with bind/ensure/combine
    - Failures are logged through tap_error at INFO (they are client errors, not faults)
"""

import logging
import re

from resultpattern.core.combinators import combine
from resultpattern.core.domain_errors import UserErrors
from resultpattern.core.domain_types import MIN_NAME_LENGTH, UserId
from resultpattern.core.errors import Error
from resultpattern.core.repository_protocols import UserRepository
from resultpattern.core.result import Failure, Result, Success
from resultpattern.models.user import User
from resultpattern.schemas.user import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s.]+(\.[^@\s.]+)*")


class UserService:
    """User lookups and mutations over an injected UserRepository."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_by_id(self, user_id: UserId) -> Result[User]:
        user = self._users.get(user_id)
        if user is None:
            return Failure(UserErrors.not_found(user_id))
        return Success(user)

    def get_by_email(self, email: str) -> Result[User]:
        user = self._users.find_by_email(email)
        if user is None:
            return Failure(UserErrors.not_found_by_email(email))
        return Success(user)

    def get_all(self) -> Result[list[User]]:
        return Success(self._users.list_all())

    def create(self, request: CreateUserRequest) -> Result[User]:
        return (
            validate_name(request.name)
            .bind(lambda _: validate_email(request.email))
            .ensure(
                lambda email: self._users.find_by_email(email) is None,
                UserErrors.email_already_exists(request.email or ""),
            )
            .map(lambda email: User(
                id=self._users.next_id(),
                name=request.name.strip(),
                email=email.lower(),
            ))
            .tap(self._users.add)
            .tap(lambda user: logger.info(
                f"User {user.id} created", extra={"user_id": user.id},
            ))
            .tap_error(lambda error: _log_rejected("create", error))
        )

    def update(self, user_id: UserId, request: UpdateUserRequest) -> Result[User]:
        return (
            self.get_by_id(user_id)
            .bind(lambda user: self._validate_update(user, request))
            .tap(lambda user: _apply_update(user, request))
            .tap_error(lambda error: _log_rejected("update", error))
        )

    def delete(self, user_id: UserId) -> Result[None]:
        return (
            self.get_by_id(user_id)
            .tap(self._users.remove)
            .tap(lambda user: logger.info(
                f"User {user.id} deleted", extra={"user_id": user.id},
            ))
            .to_result(None)
        )

    def _validate_update(self, user: User, request: UpdateUserRequest) -> Result[User]:
        name_check = Success() if request.name is None else validate_name(request.name)
        email_check = Success() if request.email is None else (
            validate_email(request.email).ensure(
                lambda email: self._email_free_for(email, user.id),
                UserErrors.email_already_exists(request.email),
            )
        )
        # name problems are reported before email problems
        return combine(name_check, email_check).to_result(user)

    def _email_free_for(self, email: str, user_id: UserId) -> bool:
        owner = self._users.find_by_email(email)
        return owner is None or owner.id == user_id


# ─── Field Checks ────────────────────────────────────────────────

def validate_name(name: str | None) -> Result[str]:
    if name is None or not name.strip():
        return Failure(UserErrors.NAME_REQUIRED)
    if len(name.strip()) < MIN_NAME_LENGTH:
        return Failure(UserErrors.NAME_TOO_SHORT)
    return Success(name.strip())


def validate_email(email: str | None) -> Result[str]:
    if email is None or not email.strip():
        return Failure(UserErrors.EMAIL_REQUIRED)
    if not EMAIL_PATTERN.fullmatch(email):
        return Failure(UserErrors.INVALID_EMAIL)
    return Success(email)


def _apply_update(user: User, request: UpdateUserRequest) -> None:
    if request.name is not None:
        user.name = request.name.strip()
    if request.email is not None:
        user.email = request.email.lower()
    logger.info(f"User {user.id} updated", extra={"user_id": user.id})


def _log_rejected(operation: str, error: Error) -> None:
    logger.info(
        f"User {operation} rejected: {error.code}",
        extra={"error_code": error.code, "error_kind": error.kind.value},
    )
