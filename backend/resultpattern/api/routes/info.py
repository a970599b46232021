"""API Info: root document listing endpoints and the seeded test data."""

from fastapi import APIRouter, Request

from resultpattern.infrastructure.memory_store import SEED_PRODUCTS, SEED_USERS

router = APIRouter(tags=["info"])


@router.get("/")
async def api_info(request: Request):
    settings = request.app.state.settings
    return {
        "title": settings.app_title,
        "description": "Demonstrates the Result pattern for error handling in Python",
        "version": settings.app_version,
        "endpoints": {
            "users": ["GET /api/users", "GET /api/users/{id}", "POST /api/users"],
            "products": ["GET /api/products", "GET /api/products/{id}", "POST /api/products"],
            "orders": [
                "GET /api/orders/{id}", "POST /api/orders", "POST /api/orders/{id}/cancel",
            ],
            "demo": ["GET /api/demo/match/{userId}", "GET /api/demo/async/{userId}"],
        },
        "testData": {
            "users": f"IDs {', '.join(str(u[0]) for u in SEED_USERS)} exist",
            "products": f"IDs {SEED_PRODUCTS[0][0]} through {SEED_PRODUCTS[-1][0]} exist",
        } if settings.seed_demo_data else {},
    }
