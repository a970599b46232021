"""Service test fixtures: a freshly seeded in-memory store per test.

Invariants:
    - Every test gets its own InMemoryStore; no state leaks between tests
    - Services are wired exactly like build_container() wires them

Design Decisions:
    - Fixtures build services directly (no HTTP): these tests exercise the Result
      chains, routes are covered in tests/api
"""

import pytest

from resultpattern.infrastructure.memory_store import InMemoryStore, seed_demo_data
from resultpattern.services.order_service import OrderService
from resultpattern.services.product_service import ProductService
from resultpattern.services.user_service import UserService


@pytest.fixture
def store():
    store = InMemoryStore()
    seed_demo_data(store)
    return store


@pytest.fixture
def user_service(store):
    return UserService(store.users)


@pytest.fixture
def product_service(store):
    return ProductService(store.products)


@pytest.fixture
def order_service(store, user_service, product_service):
    return OrderService(store.orders, user_service, product_service)


@pytest.fixture
def releasing_order_service(store, user_service, product_service):
    """OrderService that restores reserved stock when creation fails."""
    return OrderService(
        store.orders, user_service, product_service, release_stock_on_failure=True,
    )
