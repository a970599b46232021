"""Infrastructure Layer: storage and cross-cutting concerns (logging).

Invariants:
    - Infrastructure never imports from services/ or api/
"""
