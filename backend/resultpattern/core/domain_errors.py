"""Domain Error Catalog: every error code the services can return, in one place.

Invariants:
    - Codes are "<Aggregate>.<Reason>" and never change (clients match on them)
    - Parameterised errors are functions, fixed errors are module constants
    - Kinds decide the HTTP status at the boundary; the catalog never mentions HTTP

Design Decisions:
    - One class per aggregate used as a namespace: call sites read
      `UserErrors.not_found(id)` (ADR: single source of error documentation)
"""

from decimal import Decimal
from uuid import UUID

from resultpattern.core.errors import Error


def _money(amount: Decimal) -> str:
    return f"${amount:,.2f}"


class UserErrors:
    @staticmethod
    def not_found(user_id: int) -> Error:
        return Error.not_found("User.NotFound", f"User with ID {user_id} was not found")

    @staticmethod
    def not_found_by_email(email: str) -> Error:
        return Error.not_found(
            "User.NotFoundByEmail", f"User with email '{email}' was not found",
        )

    @staticmethod
    def email_already_exists(email: str) -> Error:
        return Error.conflict(
            "User.EmailExists", f"A user with email '{email}' already exists",
        )

    INVALID_EMAIL = Error.validation("User.InvalidEmail", "The email format is invalid")
    EMAIL_REQUIRED = Error.validation("User.EmailRequired", "Email is required")
    NAME_REQUIRED = Error.validation("User.NameRequired", "Name is required")
    NAME_TOO_SHORT = Error.validation(
        "User.NameTooShort", "Name must be at least 2 characters",
    )
    PASSWORD_TOO_WEAK = Error.validation(
        "User.PasswordTooWeak",
        "Password must be at least 8 characters with uppercase, lowercase, and digits",
    )
    INVALID_CREDENTIALS = Error.unauthorized(
        "User.InvalidCredentials", "Invalid email or password",
    )
    ACCOUNT_LOCKED = Error.forbidden(
        "User.AccountLocked", "Account is locked due to too many failed attempts",
    )


class ProductErrors:
    @staticmethod
    def not_found(product_id: UUID) -> Error:
        return Error.not_found(
            "Product.NotFound", f"Product with ID {product_id} was not found",
        )

    @staticmethod
    def not_found_by_sku(sku: str) -> Error:
        return Error.not_found(
            "Product.NotFoundBySku", f"Product with SKU '{sku}' was not found",
        )

    @staticmethod
    def sku_already_exists(sku: str) -> Error:
        return Error.conflict(
            "Product.SkuExists", f"A product with SKU '{sku}' already exists",
        )

    @staticmethod
    def insufficient_stock(product_id: UUID, requested: int, available: int) -> Error:
        return Error.conflict(
            "Product.InsufficientStock",
            f"Insufficient stock for product {product_id}. "
            f"Requested: {requested}, Available: {available}",
        )

    NAME_REQUIRED = Error.validation("Product.NameRequired", "Product name is required")
    INVALID_PRICE = Error.validation(
        "Product.InvalidPrice", "Price must be greater than zero",
    )
    INVALID_STOCK = Error.validation("Product.InvalidStock", "Stock cannot be negative")


class OrderErrors:
    @staticmethod
    def not_found(order_id: UUID) -> Error:
        return Error.not_found("Order.NotFound", f"Order with ID {order_id} was not found")

    @staticmethod
    def total_exceeds_limit(total: Decimal, limit: Decimal) -> Error:
        return Error.validation(
            "Order.TotalExceedsLimit",
            f"Order total ({_money(total)}) exceeds maximum allowed ({_money(limit)})",
        )

    @staticmethod
    def payment_failed(reason: str) -> Error:
        return Error.failure("Order.PaymentFailed", f"Payment failed: {reason}")

    @staticmethod
    def invalid_status(status: str) -> Error:
        return Error.validation(
            "Order.InvalidStatus", f"Cannot ship order with status {status}",
        )

    EMPTY_CART = Error.validation("Order.EmptyCart", "Cannot create order with empty cart")
    INVALID_QUANTITY = Error.validation(
        "Order.InvalidQuantity", "Quantity must be at least 1",
    )
    ALREADY_SHIPPED = Error.conflict(
        "Order.AlreadyShipped", "Cannot modify an order that has already shipped",
    )
    ALREADY_CANCELLED = Error.conflict(
        "Order.AlreadyCancelled", "Order has already been cancelled",
    )


class AuthErrors:
    INVALID_TOKEN = Error.unauthorized(
        "Auth.InvalidToken", "The authentication token is invalid or expired",
    )
    MISSING_TOKEN = Error.unauthorized(
        "Auth.MissingToken", "Authentication token is required",
    )
    INSUFFICIENT_PERMISSIONS = Error.forbidden(
        "Auth.InsufficientPermissions",
        "You do not have permission to perform this action",
    )
