"""User record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from resultpattern.core.domain_types import UserId


@dataclass
class User:
    id: UserId
    name: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
