"""Order Service: order creation as one bind chain, plus cancel/ship transitions.

Invariants:
    - create() runs: validate request -> user exists -> reserve each item -> build order
      (total <= max_order_total) -> store. The first failure stops the chain.
    - Stock is reserved item by item as the chain passes each line
    - With release_stock_on_failure=False (default) reservations made before a later
      failure stay decremented; with True they are restored by a tap_error step
    - Status changes only happen in tap steps after the transition check succeeded

Design Decisions:
    - New orders start Confirmed: there is no payment step to hold them in Pending
    - get_by_user_id checks the user first so an unknown user is 404, not an empty list
"""

import logging
from decimal import Decimal

from resultpattern.core.domain_errors import OrderErrors
from resultpattern.core.domain_types import (
    DEFAULT_MAX_ORDER_TOTAL, SHIPPABLE_STATUSES, OrderId, OrderStatus, UserId,
)
from resultpattern.core.errors import Error
from resultpattern.core.repository_protocols import OrderRepository
from resultpattern.core.result import Failure, Result, Success
from resultpattern.models.order import Order, OrderItem
from resultpattern.models.product import Product
from resultpattern.schemas.order import CreateOrderRequest, OrderItemRequest
from resultpattern.services.product_service import ProductService
from resultpattern.services.user_service import UserService

logger = logging.getLogger(__name__)

Reservation = tuple[Product, int]


class OrderService:
    """Order workflows over an injected OrderRepository and the user/product services."""

    def __init__(
        self,
        orders: OrderRepository,
        users: UserService,
        products: ProductService,
        max_order_total: Decimal = DEFAULT_MAX_ORDER_TOTAL,
        release_stock_on_failure: bool = False,
    ):
        self._orders = orders
        self._users = users
        self._products = products
        self._max_order_total = max_order_total
        self._release_stock_on_failure = release_stock_on_failure

    def get_by_id(self, order_id: OrderId) -> Result[Order]:
        order = self._orders.get(order_id)
        if order is None:
            return Failure(OrderErrors.not_found(order_id))
        return Success(order)

    def get_by_user_id(self, user_id: UserId) -> Result[list[Order]]:
        return self._users.get_by_id(user_id).map(
            lambda _: self._orders.list_by_user(user_id),
        )

    def create(self, request: CreateOrderRequest) -> Result[Order]:
        reservations: list[Reservation] = []
        return (
            _validate_request(request)
            .bind(lambda _: self._users.get_by_id(request.user_id))
            .bind(lambda _: self._reserve_items(request.items, reservations))
            .bind(lambda items: self._build_order(request.user_id, items))
            .tap(self._orders.add)
            .tap(lambda order: logger.info(
                f"Order {order.id} created for user {order.user_id}",
                extra={"order_id": str(order.id), "user_id": order.user_id},
            ))
            .tap_error(lambda error: self._on_create_failed(error, reservations))
        )

    def cancel(self, order_id: OrderId) -> Result[Order]:
        return (
            self.get_by_id(order_id)
            .bind(_validate_can_cancel)
            .tap(lambda order: _set_status(order, OrderStatus.CANCELLED))
        )

    def ship(self, order_id: OrderId) -> Result[Order]:
        return (
            self.get_by_id(order_id)
            .bind(_validate_can_ship)
            .tap(lambda order: _set_status(order, OrderStatus.SHIPPED))
        )

    # ─── Create steps ────────────────────────────────────────────

    def _reserve_items(
        self, items: list[OrderItemRequest], reservations: list[Reservation],
    ) -> Result[list[OrderItem]]:
        order_items: list[OrderItem] = []
        for item in items:
            reserved = self._products.reserve_stock(item.product_id, item.quantity)
            if reserved.is_failure:
                return Failure(reserved.error)
            product = reserved.value
            reservations.append((product, item.quantity))
            order_items.append(OrderItem(
                product_id=product.id,
                product_name=product.name,
                quantity=item.quantity,
                unit_price=product.price,
            ))
        return Success(order_items)

    def _build_order(self, user_id: UserId, items: list[OrderItem]) -> Result[Order]:
        order = Order(user_id=user_id, items=items, status=OrderStatus.CONFIRMED)
        if order.total > self._max_order_total:
            return Failure(OrderErrors.total_exceeds_limit(order.total, self._max_order_total))
        return Success(order)

    def _on_create_failed(self, error: Error, reservations: list[Reservation]) -> None:
        logger.info(
            f"Order creation rejected: {error.code}",
            extra={"error_code": error.code, "error_kind": error.kind.value},
        )
        if not reservations:
            return
        if not self._release_stock_on_failure:
            logger.warning(
                f"Order failed after reserving {len(reservations)} line(s); "
                f"stock left decremented",
                extra={"error_code": error.code},
            )
            return
        for product, quantity in reservations:
            self._products.release_stock(product, quantity)


# ─── Checks ──────────────────────────────────────────────────────

def _validate_request(request: CreateOrderRequest) -> Result[CreateOrderRequest]:
    if not request.items:
        return Failure(OrderErrors.EMPTY_CART)
    if any(item.quantity < 1 for item in request.items):
        return Failure(OrderErrors.INVALID_QUANTITY)
    return Success(request)


def _validate_can_cancel(order: Order) -> Result[Order]:
    if order.status == OrderStatus.CANCELLED:
        return Failure(OrderErrors.ALREADY_CANCELLED)
    if order.status in (OrderStatus.SHIPPED, OrderStatus.DELIVERED):
        return Failure(OrderErrors.ALREADY_SHIPPED)
    return Success(order)


def _validate_can_ship(order: Order) -> Result[Order]:
    if order.status == OrderStatus.CANCELLED:
        return Failure(OrderErrors.ALREADY_CANCELLED)
    if order.status == OrderStatus.SHIPPED:
        return Failure(OrderErrors.ALREADY_SHIPPED)
    if order.status not in SHIPPABLE_STATUSES:
        return Failure(OrderErrors.invalid_status(order.status.value))
    return Success(order)


def _set_status(order: Order, status: OrderStatus) -> None:
    order.status = status
    logger.info(
        f"Order {order.id} -> {status.value}", extra={"order_id": str(order.id)},
    )
