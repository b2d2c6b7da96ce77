"""Seller ORM — persists marketplace sellers.

Invariants:
    - id is a UUID primary key assigned by the domain (not the database)
    - name is non-nullable text
    - deleting a seller cascades to its products (FK + explicit repository delete)

Design Decisions:
    - Generic Uuid type: native uuid on PostgreSQL, CHAR(32) on SQLite tests
"""

import uuid
from datetime import datetime

from sqlalchemy import Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.db.base import Base


class SellerModel(Base):
    __tablename__ = "sellers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
