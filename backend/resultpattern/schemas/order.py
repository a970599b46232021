"""Order Schemas: order creation request and the public order shape.

Invariants:
    - items may be omitted or empty: the service answers with Order.EmptyCart
    - quantity is not range-checked here (Order.InvalidQuantity comes from the service)
    - Money is serialized as JSON numbers (float), computed from Decimal amounts
"""

from datetime import datetime
from uuid import UUID

from resultpattern.models.order import Order, OrderItem
from resultpattern.schemas.common import CamelModel


class OrderItemRequest(CamelModel):
    product_id: UUID
    quantity: int


class CreateOrderRequest(CamelModel):
    user_id: int
    items: list[OrderItemRequest] | None = None


class OrderItemResponse(CamelModel):
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: float
    subtotal: float

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=float(item.unit_price),
            subtotal=float(item.subtotal),
        )


class OrderResponse(CamelModel):
    id: UUID
    user_id: int
    items: list[OrderItemResponse]
    total: float
    status: str
    created_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            user_id=order.user_id,
            items=[OrderItemResponse.from_domain(i) for i in order.items],
            total=float(order.total),
            status=order.status.value,
            created_at=order.created_at,
        )
