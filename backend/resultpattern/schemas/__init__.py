"""Pydantic Schemas: request/response contracts for the HTTP boundary.

Invariants:
    - JSON keys are camelCase on the wire, snake_case in Python
    - Request schemas only check shape (types); business rules are enforced by
      the services so they surface as Result failures with stable error codes

Design Decisions:
    - Separate from models/: schemas are API contracts, models are domain records
"""
