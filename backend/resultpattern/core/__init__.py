"""Core Layer: the Result type, its combinators and the error model. No IO, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Everything here is pure: values in, values out

Design Decisions:
    - Functional core separated from imperative shell (routes, store, logging)
"""
