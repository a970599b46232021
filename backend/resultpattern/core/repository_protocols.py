"""Boundary Protocols: storage contracts the services depend on.

Invariants:
    - Services NEVER import a concrete store; implementations are injected
    - Lookups return the record or None; turning None into a domain Error is the
      service's job (the store knows nothing about Results)
    - Returned records are the stored instances (mutations through them are visible)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the only implementation is in-memory
"""

from typing import Protocol

from resultpattern.core.domain_types import OrderId, ProductId, UserId
from resultpattern.models.order import Order
from resultpattern.models.product import Product
from resultpattern.models.user import User


class UserRepository(Protocol):
    """Contract for user storage."""
    def get(self, user_id: UserId) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...
    def list_all(self) -> list[User]: ...
    def next_id(self) -> UserId: ...
    def add(self, user: User) -> None: ...
    def remove(self, user: User) -> None: ...


class ProductRepository(Protocol):
    """Contract for product storage."""
    def get(self, product_id: ProductId) -> Product | None: ...
    def find_by_sku(self, sku: str) -> Product | None: ...
    def list_all(self) -> list[Product]: ...
    def add(self, product: Product) -> None: ...


class OrderRepository(Protocol):
    """Contract for order storage."""
    def get(self, order_id: OrderId) -> Order | None: ...
    def list_by_user(self, user_id: UserId) -> list[Order]: ...
    def add(self, order: Order) -> None: ...
