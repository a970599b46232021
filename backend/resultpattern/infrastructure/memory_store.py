"""In-Memory Store: list-backed repositories plus the demo seed data.

Invariants:
    - One InMemoryStore per app instance; nothing lives at module level
    - Email and SKU lookups are case-insensitive
    - User ids are sequential and never reused after deletion
    - seed_demo_data() is idempotent per store (only seeds empty collections)

Design Decisions:
    - Plain lists, no locking: single-process uvicorn, no persistence by scope
    - Seed ids are fixed: GET / advertises them as ready-made test data
"""

import logging
from decimal import Decimal
from uuid import UUID

from resultpattern.core.domain_types import OrderId, ProductId, UserId
from resultpattern.models.order import Order
from resultpattern.models.product import Product
from resultpattern.models.user import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: list[User] = []
        self._next_id = 1

    def get(self, user_id: UserId) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def find_by_email(self, email: str) -> User | None:
        needle = email.casefold()
        return next((u for u in self._users if u.email.casefold() == needle), None)

    def list_all(self) -> list[User]:
        return list(self._users)

    def next_id(self) -> UserId:
        user_id = UserId(self._next_id)
        self._next_id += 1
        return user_id

    def add(self, user: User) -> None:
        self._users.append(user)
        self._next_id = max(self._next_id, user.id + 1)

    def remove(self, user: User) -> None:
        self._users.remove(user)


class InMemoryProductRepository:
    def __init__(self) -> None:
        self._products: list[Product] = []

    def get(self, product_id: ProductId) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def find_by_sku(self, sku: str) -> Product | None:
        needle = sku.casefold()
        return next((p for p in self._products if p.sku.casefold() == needle), None)

    def list_all(self) -> list[Product]:
        return list(self._products)

    def add(self, product: Product) -> None:
        self._products.append(product)


class InMemoryOrderRepository:
    def __init__(self) -> None:
        self._orders: list[Order] = []

    def get(self, order_id: OrderId) -> Order | None:
        return next((o for o in self._orders if o.id == order_id), None)

    def list_by_user(self, user_id: UserId) -> list[Order]:
        return [o for o in self._orders if o.user_id == user_id]

    def add(self, order: Order) -> None:
        self._orders.append(order)


class InMemoryStore:
    """Groups the three repositories owned by one app instance."""

    def __init__(self) -> None:
        self.users = InMemoryUserRepository()
        self.products = InMemoryProductRepository()
        self.orders = InMemoryOrderRepository()


# ─── Seed Data ───────────────────────────────────────────────────

SEED_USERS = (
    (1, "Alice Johnson", "alice@example.com"),
    (2, "Bob Smith", "bob@example.com"),
    (3, "Charlie Brown", "charlie@example.com"),
)

SEED_PRODUCTS = (
    ("11111111-1111-1111-1111-111111111111", "Laptop Pro",
     "High-performance laptop", "1299.99", 50, "LAPTOP-001"),
    ("22222222-2222-2222-2222-222222222222", "Wireless Mouse",
     "Ergonomic wireless mouse", "49.99", 200, "MOUSE-001"),
    ("33333333-3333-3333-3333-333333333333", "USB-C Cable",
     "2m USB-C to USB-C cable", "19.99", 500, "CABLE-001"),
    ("44444444-4444-4444-4444-444444444444", 'Monitor 27"',
     "4K IPS Monitor", "599.99", 30, "MONITOR-001"),
)


def seed_demo_data(store: InMemoryStore) -> None:
    """Populate empty collections with the demo users and products."""
    if not store.users.list_all():
        for user_id, name, email in SEED_USERS:
            store.users.add(User(id=user_id, name=name, email=email))
    if not store.products.list_all():
        for product_id, name, description, price, stock, sku in SEED_PRODUCTS:
            store.products.add(Product(
                id=UUID(product_id), name=name, description=description,
                price=Decimal(price), stock=stock, sku=sku,
            ))
    logger.info(
        f"Seeded demo data: {len(store.users.list_all())} users, "
        f"{len(store.products.list_all())} products",
    )
