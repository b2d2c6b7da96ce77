"""API Dependencies — per-request service wiring and idempotency key resolution.

Invariants:
    - Services are built per request around the request's AsyncSession
    - The Idempotency-Key header wins over a body idempotency_key; neither → ""
    - Keys longer than the configured maximum are rejected before any lookup

Design Decisions:
    - Plain Depends() factories over a DI container: every wiring visible here
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config import get_settings
from marketplace.core.errors import ValidationFailedError
from marketplace.infrastructure.database import get_db
from marketplace.infrastructure.repositories import (
    SqlIdempotencyRepository, SqlProductRepository, SqlSellerRepository,
)
from marketplace.services.product_service import ProductService
from marketplace.services.seller_service import SellerService


def get_seller_service(db: AsyncSession = Depends(get_db)) -> SellerService:
    return SellerService(SqlSellerRepository(db), SqlIdempotencyRepository(db))


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(
        SqlProductRepository(db),
        SqlSellerRepository(db),
        SqlIdempotencyRepository(db),
    )


def idempotency_header(
    idempotency_key: str | None = Header(None, alias="Idempotency-Key"),
) -> str | None:
    return idempotency_key


def resolve_idempotency_key(header: str | None, body: str | None = None) -> str:
    """Pick the effective key: header, then body, then "" (disabled)."""
    key = header or body or ""
    limit = get_settings().idempotency_key_max_length
    if len(key) > limit:
        raise ValidationFailedError(
            "idempotency_key", f"must be at most {limit} characters",
        )
    return key
