"""User Schemas: create/update requests and the public user shape.

Invariants:
    - name/email are optional on the wire: missing or blank values reach the
      service, which answers with User.NameRequired / User.EmailRequired
    - UpdateUserRequest fields left as None are not changed
"""

from datetime import datetime

from resultpattern.models.user import User
from resultpattern.schemas.common import CamelModel


class CreateUserRequest(CamelModel):
    name: str | None = None
    email: str | None = None


class UpdateUserRequest(CamelModel):
    name: str | None = None
    email: str | None = None


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id, name=user.name, email=user.email, created_at=user.created_at,
        )
