"""Product Routes: catalog lookups, product creation and stock adjustment."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from resultpattern.api.dependencies import get_product_service
from resultpattern.api.problem_details import to_api_response, to_created_response
from resultpattern.schemas.product import (
    CreateProductRequest, ProductResponse, StockUpdateRequest,
)
from resultpattern.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def get_all_products(
    request: Request, service: ProductService = Depends(get_product_service),
):
    """Get all products."""
    result = service.get_all().map(
        lambda products: [ProductResponse.from_domain(p) for p in products],
    )
    return to_api_response(result, request)


@router.get("/sku/{sku}")
async def get_product_by_sku(
    sku: str, request: Request, service: ProductService = Depends(get_product_service),
):
    """Get a product by SKU (case-insensitive)."""
    return to_api_response(service.get_by_sku(sku).map(ProductResponse.from_domain), request)


@router.get("/{product_id}")
async def get_product_by_id(
    product_id: UUID, request: Request,
    service: ProductService = Depends(get_product_service),
):
    """Get a product by ID."""
    return to_api_response(
        service.get_by_id(product_id).map(ProductResponse.from_domain), request,
    )


@router.post("")
async def create_product(
    body: CreateProductRequest, request: Request,
    service: ProductService = Depends(get_product_service),
):
    """Create a new product."""
    return to_created_response(
        service.create(body).map(ProductResponse.from_domain),
        lambda product: f"/api/products/{product.id}",
        request,
    )


@router.patch("/{product_id}/stock")
async def update_product_stock(
    product_id: UUID, body: StockUpdateRequest, request: Request,
    service: ProductService = Depends(get_product_service),
):
    """Apply a signed stock delta."""
    return to_api_response(
        service.update_stock(product_id, body.quantity).map(ProductResponse.from_domain),
        request,
    )
