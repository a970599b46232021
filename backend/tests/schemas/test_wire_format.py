"""Schemas: verifies camelCase on the wire and float money in responses.

Tests:
    - Requests accept camelCase and snake_case keys
    - Responses dump camelCase with money as float
"""

from decimal import Decimal
from uuid import UUID

from resultpattern.core.domain_types import OrderStatus
from resultpattern.models.order import Order, OrderItem
from resultpattern.schemas.order import CreateOrderRequest, OrderResponse

MOUSE = UUID("22222222-2222-2222-2222-222222222222")


def test_request_accepts_both_spellings():
    camel = CreateOrderRequest.model_validate(
        {"userId": 1, "items": [{"productId": str(MOUSE), "quantity": 2}]},
    )
    snake = CreateOrderRequest.model_validate(
        {"user_id": 1, "items": [{"product_id": str(MOUSE), "quantity": 2}]},
    )
    assert camel == snake
    assert camel.items[0].product_id == MOUSE


def test_items_optional():
    assert CreateOrderRequest.model_validate({"userId": 1}).items is None


def test_order_response_dump():
    order = Order(
        user_id=1,
        items=[OrderItem(MOUSE, "Wireless Mouse", 2, Decimal("49.99"))],
        status=OrderStatus.CONFIRMED,
    )
    dumped = OrderResponse.from_domain(order).model_dump(by_alias=True)
    assert dumped["userId"] == 1
    assert dumped["total"] == 99.98
    assert dumped["status"] == "Confirmed"
    assert dumped["items"][0]["unitPrice"] == 49.99
    assert dumped["items"][0]["subtotal"] == 99.98
