"""Product Service: verifies catalog lookups, creation rules and stock movements.

Tests:
    - SKU lookups are case-insensitive; new SKUs are stored upper-cased
    - create() checks name, price, stock, then SKU uniqueness
    - update_stock() never lets stock go negative
    - reserve_stock() fails with InsufficientStock and leaves stock unchanged
"""

from decimal import Decimal
from uuid import UUID, uuid4

from resultpattern.core.errors import ErrorKind
from resultpattern.infrastructure.memory_store import SEED_PRODUCTS
from resultpattern.schemas.product import CreateProductRequest

LAPTOP_ID = UUID(SEED_PRODUCTS[0][0])
MOUSE_ID = UUID(SEED_PRODUCTS[1][0])


def _request(**overrides):
    fields = {"name": "Keyboard", "price": Decimal("79.99"), "stock": 10, "sku": "kbd-001"}
    fields.update(overrides)
    return CreateProductRequest(**fields)


# ─── Lookups ─────────────────────────────────────────────────────

def test_get_by_id(product_service):
    assert product_service.get_by_id(LAPTOP_ID).value.sku == "LAPTOP-001"


def test_get_by_id_unknown(product_service):
    result = product_service.get_by_id(uuid4())
    assert result.error.code == "Product.NotFound"
    assert result.error.kind is ErrorKind.NOT_FOUND


def test_get_by_sku_is_case_insensitive(product_service):
    assert product_service.get_by_sku("mouse-001").value.id == MOUSE_ID


def test_get_by_sku_unknown(product_service):
    assert product_service.get_by_sku("NOPE").error.code == "Product.NotFoundBySku"


def test_get_all(product_service):
    assert len(product_service.get_all().value) == 4


# ─── Create ──────────────────────────────────────────────────────

def test_create_stores_product(product_service):
    result = product_service.create(_request(name="  Keyboard  ", description=" Mechanical "))
    product = result.value
    assert product.name == "Keyboard"
    assert product.description == "Mechanical"
    assert product.sku == "KBD-001"
    assert product.price == Decimal("79.99")
    assert product_service.get_by_sku("KBD-001").value is product


def test_create_requires_name(product_service):
    assert product_service.create(_request(name="  ")).error.code == "Product.NameRequired"


def test_create_rejects_non_positive_price(product_service):
    assert product_service.create(_request(price=Decimal("0"))).error.code == "Product.InvalidPrice"


def test_create_rejects_negative_stock(product_service):
    assert product_service.create(_request(stock=-1)).error.code == "Product.InvalidStock"


def test_create_duplicate_sku_is_conflict(product_service):
    result = product_service.create(_request(sku="laptop-001"))
    assert result.error.code == "Product.SkuExists"
    assert result.error.kind is ErrorKind.CONFLICT


# ─── Stock ───────────────────────────────────────────────────────

def test_update_stock_applies_delta(product_service):
    assert product_service.update_stock(LAPTOP_ID, 5).value.stock == 55
    assert product_service.update_stock(LAPTOP_ID, -55).value.stock == 0


def test_update_stock_rejects_negative_result(product_service):
    result = product_service.update_stock(LAPTOP_ID, -51)
    assert result.error.code == "Product.InvalidStock"
    assert product_service.get_by_id(LAPTOP_ID).value.stock == 50


def test_reserve_stock_decrements(product_service):
    assert product_service.reserve_stock(MOUSE_ID, 3).value.stock == 197


def test_reserve_stock_insufficient_leaves_stock(product_service):
    result = product_service.reserve_stock(LAPTOP_ID, 1000000)
    assert result.error.code == "Product.InsufficientStock"
    assert "Requested: 1000000, Available: 50" in result.error.description
    assert product_service.get_by_id(LAPTOP_ID).value.stock == 50


def test_release_stock_restores(product_service):
    product = product_service.reserve_stock(MOUSE_ID, 10).value
    product_service.release_stock(product, 10)
    assert product.stock == 200
