"""Seller Entity — a marketplace participant that owns products.

Invariants:
    - Immutable: renamed() returns a candidate, the original is never touched
    - Fresh sellers get a random UUID and created_at == updated_at
    - Validity is NOT checked here — see core/validation.py

Design Decisions:
    - Candidates over in-place mutation: a rejected update cannot leave a
      half-applied entity behind
"""

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import uuid4

from marketplace.core.domain_types import SellerId, utc_now


@dataclass(frozen=True)
class Seller:
    id: SellerId
    name: str
    created_at: datetime
    updated_at: datetime

    def renamed(self, name: str, at: datetime | None = None) -> "Seller":
        """Candidate with a new name and a refreshed updated_at."""
        return replace(self, name=name, updated_at=at or utc_now())


def new_seller(name: str, now: datetime | None = None) -> Seller:
    now = now or utc_now()
    return Seller(
        id=SellerId(uuid4()), name=name, created_at=now, updated_at=now,
    )
