"""Command & Result Schemas — the service-layer contract and the replay codec.

Invariants:
    - Commands are frozen; idempotency_key "" disables idempotency for the call
    - Results round-trip exactly through model_dump_json / model_validate_json:
      UUIDs, ISO-8601 timestamps and Decimal prices (serialized as strings)
    - Results are built from validated entities or loaded entities only

Design Decisions:
    - Pydantic over hand-written JSON: the same models serialize the cached
      request/response and serve as FastAPI response models
"""

from datetime import datetime
from decimal import Decimal
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from marketplace.core.product import Product
from marketplace.core.seller import Seller


class Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    idempotency_key: str = ""


# ─── Seller commands ─────────────────────────────────────────────

class CreateSellerCommand(Command):
    name: str


class UpdateSellerCommand(Command):
    id: UUID
    name: str


class DeleteSellerCommand(Command):
    id: UUID


# ─── Product commands ────────────────────────────────────────────

class CreateProductCommand(Command):
    name: str
    price: Decimal
    seller_id: UUID


class UpdateProductCommand(Command):
    id: UUID
    name: str
    price: Decimal
    seller_id: UUID


class DeleteProductCommand(Command):
    id: UUID


# ─── Results ─────────────────────────────────────────────────────

class SellerResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, seller: Seller) -> "SellerResult":
        return cls(
            id=seller.id,
            name=seller.name,
            created_at=seller.created_at,
            updated_at=seller.updated_at,
        )


class ProductResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID
    name: str
    price: Decimal
    seller: SellerResult
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            seller=SellerResult.from_entity(product.seller),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class DeleteResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool


ResultT = TypeVar("ResultT", bound=BaseModel)
