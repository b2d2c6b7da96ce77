"""Pydantic Schemas — request/response validation and service-layer commands.

Invariants:
    - Schemas validate at system boundaries (HTTP input, service commands)
    - Results double as the JSON codec for cached idempotent responses

Design Decisions:
    - Separate from models: schemas are contracts, models are persistence
"""
