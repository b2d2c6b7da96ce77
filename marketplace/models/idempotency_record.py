"""IdempotencyRecord ORM — cached command outcomes keyed by client token.

Invariants:
    - key is UNIQUE: the constraint is the cross-process guard against two
      cached responses for one key
    - response/status_code filled when the command completes
    - rows are never deleted by the application (no expiry)

Design Decisions:
    - Text columns for request/response: the payloads are pydantic JSON
      strings and are only ever decoded by the service layer
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Integer, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from marketplace.db.base import Base


class IdempotencyRecordModel(Base):
    __tablename__ = "idempotency_records"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    request: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status_code: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
