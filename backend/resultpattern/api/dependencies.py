"""Dependency Providers: hand each route the services of the app it runs in.

Invariants:
    - Services come from request.app.state.container (set by create_app)
    - No provider constructs a service; tests swap the whole container instead
"""

from fastapi import Depends, Request

from resultpattern.services.container import ServiceContainer
from resultpattern.services.order_service import OrderService
from resultpattern.services.product_service import ProductService
from resultpattern.services.user_service import UserService


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_user_service(container: ServiceContainer = Depends(get_container)) -> UserService:
    return container.users


def get_product_service(
    container: ServiceContainer = Depends(get_container),
) -> ProductService:
    return container.products


def get_order_service(container: ServiceContainer = Depends(get_container)) -> OrderService:
    return container.orders
