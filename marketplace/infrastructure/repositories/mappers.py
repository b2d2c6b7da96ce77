"""Row Mappers — ORM rows to core entities.

Invariants:
    - Returned timestamps are always timezone-aware UTC (SQLite drops tzinfo)
"""

from datetime import datetime, timezone

from marketplace.core.domain_types import (
    IdempotencyRecordId, ProductId, SellerId,
)
from marketplace.core.idempotency_record import IdempotencyRecord
from marketplace.core.product import Product
from marketplace.core.seller import Seller
from marketplace.models.idempotency_record import IdempotencyRecordModel
from marketplace.models.product import ProductModel
from marketplace.models.seller import SellerModel


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def seller_from_row(row: SellerModel) -> Seller:
    return Seller(
        id=SellerId(row.id),
        name=row.name,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def product_from_row(row: ProductModel) -> Product:
    return Product(
        id=ProductId(row.id),
        name=row.name,
        price=row.price,
        seller=seller_from_row(row.seller),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def record_from_row(row: IdempotencyRecordModel) -> IdempotencyRecord:
    return IdempotencyRecord(
        id=IdempotencyRecordId(row.id),
        key=row.key,
        request=row.request,
        response=row.response,
        status_code=row.status_code,
        created_at=as_utc(row.created_at),
    )
