"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure/: repositories map them to core entities

Design Decisions:
    - One file per table for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from marketplace.models.seller import SellerModel  # noqa: F401
from marketplace.models.product import ProductModel  # noqa: F401
from marketplace.models.idempotency_record import IdempotencyRecordModel  # noqa: F401
