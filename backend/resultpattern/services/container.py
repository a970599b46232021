"""Service Container: wires one store to the three services for one app instance.

Invariants:
    - build_container() is the only place services are constructed for HTTP use
    - Order limits come from Settings, never from module constants at call sites
"""

from dataclasses import dataclass

from resultpattern.config import Settings
from resultpattern.infrastructure.memory_store import InMemoryStore, seed_demo_data
from resultpattern.services.order_service import OrderService
from resultpattern.services.product_service import ProductService
from resultpattern.services.user_service import UserService


@dataclass
class ServiceContainer:
    store: InMemoryStore
    users: UserService
    products: ProductService
    orders: OrderService


def build_container(settings: Settings, store: InMemoryStore | None = None) -> ServiceContainer:
    store = store or InMemoryStore()
    if settings.seed_demo_data:
        seed_demo_data(store)
    users = UserService(store.users)
    products = ProductService(store.products)
    orders = OrderService(
        store.orders, users, products,
        max_order_total=settings.max_order_total,
        release_stock_on_failure=settings.release_stock_on_failure,
    )
    return ServiceContainer(store=store, users=users, products=products, orders=orders)
