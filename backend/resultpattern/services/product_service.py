"""Product Service: catalog lookups, product creation and stock movements.

Invariants:
    - SKUs are stored upper-cased and matched case-insensitively
    - Stock never goes negative: update_stock and reserve_stock check before mutating
    - reserve_stock is the only path orders use to decrement stock

Design Decisions:
    - release_stock takes the Product instance, not an id: it undoes a reservation
      that already resolved, so there is nothing left to look up or fail
"""

import logging

from resultpattern.core.domain_errors import ProductErrors
from resultpattern.core.domain_types import ProductId
from resultpattern.core.repository_protocols import ProductRepository
from resultpattern.core.result import Failure, Result, Success
from resultpattern.models.product import Product
from resultpattern.schemas.product import CreateProductRequest

logger = logging.getLogger(__name__)


class ProductService:
    """Product lookups and stock changes over an injected ProductRepository."""

    def __init__(self, products: ProductRepository):
        self._products = products

    def get_by_id(self, product_id: ProductId) -> Result[Product]:
        product = self._products.get(product_id)
        if product is None:
            return Failure(ProductErrors.not_found(product_id))
        return Success(product)

    def get_by_sku(self, sku: str) -> Result[Product]:
        product = self._products.find_by_sku(sku)
        if product is None:
            return Failure(ProductErrors.not_found_by_sku(sku))
        return Success(product)

    def get_all(self) -> Result[list[Product]]:
        return Success(self._products.list_all())

    def create(self, request: CreateProductRequest) -> Result[Product]:
        return (
            _validate_new_product(request)
            .ensure(
                lambda r: self._products.find_by_sku(r.sku) is None,
                ProductErrors.sku_already_exists(request.sku),
            )
            .map(_build_product)
            .tap(self._products.add)
            .tap(lambda p: logger.info(
                f"Product {p.sku} created", extra={"product_id": str(p.id)},
            ))
        )

    def update_stock(self, product_id: ProductId, quantity: int) -> Result[Product]:
        """Apply a signed stock delta."""
        return (
            self.get_by_id(product_id)
            .ensure(lambda p: p.stock + quantity >= 0, ProductErrors.INVALID_STOCK)
            .tap(lambda p: _adjust_stock(p, quantity))
        )

    def reserve_stock(self, product_id: ProductId, quantity: int) -> Result[Product]:
        """Decrement stock for an order line, or fail with InsufficientStock."""
        return (
            self.get_by_id(product_id)
            .bind(lambda p: _check_available(p, quantity))
            .tap(lambda p: _adjust_stock(p, -quantity))
        )

    def release_stock(self, product: Product, quantity: int) -> None:
        _adjust_stock(product, quantity)
        logger.warning(
            f"Released {quantity} unit(s) of {product.sku}",
            extra={"product_id": str(product.id)},
        )


def _validate_new_product(request: CreateProductRequest) -> Result[CreateProductRequest]:
    if request.name is None or not request.name.strip():
        return Failure(ProductErrors.NAME_REQUIRED)
    if request.price <= 0:
        return Failure(ProductErrors.INVALID_PRICE)
    if request.stock < 0:
        return Failure(ProductErrors.INVALID_STOCK)
    return Success(request)


def _build_product(request: CreateProductRequest) -> Product:
    return Product(
        name=request.name.strip(),
        description=request.description.strip() if request.description is not None else None,
        price=request.price,
        stock=request.stock,
        sku=request.sku.upper(),
    )


def _check_available(product: Product, quantity: int) -> Result[Product]:
    if product.stock < quantity:
        return Failure(ProductErrors.insufficient_stock(product.id, quantity, product.stock))
    return Success(product)


def _adjust_stock(product: Product, delta: int) -> None:
    product.stock += delta
