"""API Layer: FastAPI routes, dependency providers, boundary projection, error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes call one service method and hand the Result to problem_details

Design Decisions:
    - Thin routes delegate to services; no business rule lives in a route
"""
