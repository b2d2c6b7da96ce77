"""Product Schemas — HTTP request bodies for product endpoints.

Invariants:
    - price accepted as JSON number or string and parsed to Decimal;
      positivity is a domain rule (core/validation.py)
    - seller_id must be a UUID (malformed ids are a 400, unknown ids a 404)
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(max_length=255)
    price: Decimal
    seller_id: UUID
    idempotency_key: str | None = None


class ProductUpdate(BaseModel):
    name: str = Field(max_length=255)
    price: Decimal
    seller_id: UUID
    idempotency_key: str | None = None
