"""Seller Schemas — HTTP request bodies for seller endpoints.

Invariants:
    - Only types and lengths are checked here; name emptiness is a domain rule
      (core/validation.py) so it surfaces as a 422 ValidationFailedError
    - idempotency_key in the body is a fallback for the Idempotency-Key header
"""

from pydantic import BaseModel, Field


class SellerCreate(BaseModel):
    name: str = Field(max_length=255)
    idempotency_key: str | None = None


class SellerUpdate(BaseModel):
    name: str = Field(max_length=255)
    idempotency_key: str | None = None
