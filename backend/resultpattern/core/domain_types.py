"""Domain Types: identity wrappers, order status and order limits.

Invariants:
    - UserId wraps int (sequential), ProductId/OrderId wrap UUID
    - All order states encoded as OrderStatus; no raw string matching
    - DEFAULT_MAX_ORDER_TOTAL is the fallback when settings are not supplied

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from decimal import Decimal
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ProductId = NewType("ProductId", UUID)
OrderId = NewType("OrderId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class OrderStatus(str, Enum):
    """Order lifecycle states."""
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


SHIPPABLE_STATUSES = frozenset({OrderStatus.CONFIRMED, OrderStatus.PROCESSING})


# ─── Limits ──────────────────────────────────────────────────────

DEFAULT_MAX_ORDER_TOTAL = Decimal("10000")
MIN_NAME_LENGTH = 2
