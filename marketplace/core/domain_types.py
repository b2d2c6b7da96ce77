"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SellerId, ProductId, IdempotencyRecordId wrap UUIDs
    - IdempotencyKey is a client string; "" means idempotency is disabled
    - Entity kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from datetime import datetime, timezone
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SellerId = NewType("SellerId", UUID)
ProductId = NewType("ProductId", UUID)
IdempotencyRecordId = NewType("IdempotencyRecordId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

IdempotencyKey = NewType("IdempotencyKey", str)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Entity names used in not-found errors and log records."""
    SELLER = "Seller"
    PRODUCT = "Product"
    IDEMPOTENCY_RECORD = "IdempotencyRecord"


def idempotency_enabled(key: str) -> bool:
    """Non-empty key triggers idempotency handling."""
    return key != ""


def utc_now() -> datetime:
    """Single clock for entity timestamps — always timezone-aware UTC."""
    return datetime.now(timezone.utc)
