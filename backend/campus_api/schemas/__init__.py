"""Pydantic Schemas — request/response validation for the JSON endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Separate from models: schemas are API contracts, models are persistence
"""
