"""Product Entity — a priced item listed by a seller.

Invariants:
    - Immutable: revised() returns a candidate, the original is never touched
    - seller is a value snapshot, not a live reference — later seller
      updates do not change an already-built product
    - new_product only accepts a ValidatedSeller

Design Decisions:
    - Decimal price: exact money arithmetic and exact JSON replay
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import uuid4

from marketplace.core.domain_types import ProductId, utc_now
from marketplace.core.seller import Seller

if TYPE_CHECKING:
    from marketplace.core.validation import ValidatedSeller


@dataclass(frozen=True)
class Product:
    id: ProductId
    name: str
    price: Decimal
    seller: Seller
    created_at: datetime
    updated_at: datetime

    def revised(
        self,
        name: str,
        price: Decimal,
        seller: ValidatedSeller | None = None,
        at: datetime | None = None,
    ) -> Product:
        """Candidate with new name/price and, when given, a new seller snapshot."""
        return replace(
            self,
            name=name,
            price=price,
            seller=seller.seller if seller is not None else self.seller,
            updated_at=at or utc_now(),
        )


def new_product(
    name: str,
    price: Decimal,
    seller: ValidatedSeller,
    now: datetime | None = None,
) -> Product:
    now = now or utc_now()
    return Product(
        id=ProductId(uuid4()),
        name=name,
        price=price,
        seller=seller.seller,
        created_at=now,
        updated_at=now,
    )
