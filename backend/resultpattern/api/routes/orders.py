"""Order Routes: order creation (the bind chain), lookups, cancel and ship."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from resultpattern.api.dependencies import get_order_service
from resultpattern.api.problem_details import to_api_response, to_created_response
from resultpattern.schemas.order import CreateOrderRequest, OrderResponse
from resultpattern.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("/user/{user_id}")
async def get_orders_by_user(
    user_id: int, request: Request, service: OrderService = Depends(get_order_service),
):
    """Get all orders for a user."""
    result = service.get_by_user_id(user_id).map(
        lambda orders: [OrderResponse.from_domain(o) for o in orders],
    )
    return to_api_response(result, request)


@router.get("/{order_id}")
async def get_order_by_id(
    order_id: UUID, request: Request, service: OrderService = Depends(get_order_service),
):
    """Get an order by ID."""
    return to_api_response(service.get_by_id(order_id).map(OrderResponse.from_domain), request)


@router.post("")
async def create_order(
    body: CreateOrderRequest, request: Request,
    service: OrderService = Depends(get_order_service),
):
    """Create a new order: validate -> user -> reserve stock -> total limit -> store."""
    return to_created_response(
        service.create(body).map(OrderResponse.from_domain),
        lambda order: f"/api/orders/{order.id}",
        request,
    )


@router.post("/{order_id}/cancel")
async def cancel_order(
    order_id: UUID, request: Request, service: OrderService = Depends(get_order_service),
):
    """Cancel an order that has not shipped."""
    return to_api_response(service.cancel(order_id).map(OrderResponse.from_domain), request)


@router.post("/{order_id}/ship")
async def ship_order(
    order_id: UUID, request: Request, service: OrderService = Depends(get_order_service),
):
    """Ship a confirmed or processing order."""
    return to_api_response(service.ship(order_id).map(OrderResponse.from_domain), request)
