"""Product Schemas: creation, stock adjustment and the public product shape."""

from decimal import Decimal
from uuid import UUID

from resultpattern.models.product import Product
from resultpattern.schemas.common import CamelModel


class CreateProductRequest(CamelModel):
    name: str | None = None
    description: str | None = None
    price: Decimal = Decimal("0")
    stock: int = 0
    sku: str


class StockUpdateRequest(CamelModel):
    """Signed stock delta: positive restocks, negative withdraws."""
    quantity: int


class ProductResponse(CamelModel):
    id: UUID
    name: str
    description: str | None
    price: float
    stock: int
    sku: str

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price),
            stock=product.stock,
            sku=product.sku,
        )
