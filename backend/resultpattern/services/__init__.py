"""Services Layer: user, product and order workflows returning Results.

Invariants:
    - Services receive their repositories through __init__ (no module-level state)
    - Every public method returns a Result; none raises for an expected outcome

Design Decisions:
    - One file per aggregate; OrderService composes the other two services
"""
