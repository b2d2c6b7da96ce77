"""Product ORM — persists products with a foreign key to their seller.

Invariants:
    - Always belongs to a Seller (seller_id FK, ON DELETE CASCADE)
    - price stored as NUMERIC(12, 2)
    - seller relationship eagerly loaded (selectin) so repositories can build
      the seller snapshot without an extra await

Design Decisions:
    - Seller stored by reference in the database; the domain Product still
      holds a value snapshot taken when the row is read
"""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Text, Numeric, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.db.base import Base


class ProductModel(Base):
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2, asdecimal=True), nullable=False,
    )
    seller_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("sellers.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    seller: Mapped["SellerModel"] = relationship(
        "SellerModel", lazy="selectin",
    )
