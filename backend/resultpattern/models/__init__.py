"""Domain Records: plain dataclasses for users, products and orders.

Invariants:
    - Records hold state only; validation lives in services and returns Results
    - Derived amounts (OrderItem.subtotal, Order.total) are computed, never stored

Design Decisions:
    - Mutable dataclasses: services apply status/stock changes through Result.tap steps
"""
