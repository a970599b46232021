"""Demo Routes: show match (exit a chain into any response) and the async combinators.

Invariants:
    - /match answers 200 with a welcome or 404 with a plain message (not a problem document:
      the failure branch shapes its own response, which is the point of the demo)
    - /async runs map_async -> bind_async -> match_async and projects failures normally
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from resultpattern.api.dependencies import get_order_service, get_user_service
from resultpattern.api.problem_details import to_error_response
from resultpattern.core.combinators import bind_async, map_async, match_async
from resultpattern.core.domain_types import OrderStatus
from resultpattern.core.result import Result
from resultpattern.schemas.user import UserResponse
from resultpattern.services.order_service import OrderService
from resultpattern.services.user_service import UserService

router = APIRouter(prefix="/api/demo", tags=["demo"])


@router.get("/match/{user_id}")
async def demo_match(user_id: int, service: UserService = Depends(get_user_service)):
    """Match: exactly one handler runs and decides the whole response."""
    return service.get_by_id(user_id).match(
        on_success=lambda user: JSONResponse({
            "message": f"Welcome back, {user.name}!",
            "user": jsonable_encoder(UserResponse.from_domain(user)),
        }),
        on_failure=lambda error: JSONResponse(
            {"message": "User not found", "error": error.description},
            status_code=404,
        ),
    )


@router.get("/async/{user_id}")
async def demo_async_chain(
    user_id: int,
    request: Request,
    users: UserService = Depends(get_user_service),
    orders: OrderService = Depends(get_order_service),
):
    """Async chain: user lookup -> order summary, projected with match_async."""

    async def summarize(user: UserResponse) -> Result[dict]:
        return orders.get_by_user_id(user.id).map(lambda found: {
            "user": user,
            "orderCount": len(found),
            "totalSpent": float(sum(
                (o.total for o in found if o.status != OrderStatus.CANCELLED),
                Decimal("0"),
            )),
        })

    summary = bind_async(map_async(users.get_by_id(user_id), UserResponse.from_domain), summarize)
    return await match_async(
        summary,
        on_success=lambda body: JSONResponse(jsonable_encoder(body)),
        on_failure=lambda error: to_error_response(error, request),
    )
