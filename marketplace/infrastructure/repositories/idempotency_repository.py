"""Idempotency Repository — SQLAlchemy-backed idempotency store.

Invariants:
    - find_by_key returns None only for an unknown key; read failures raise
    - create on an existing key raises DuplicateIdempotencyKeyError (unique
      constraint), never merges into the stored record
    - update of an unknown record id raises ResourceNotFoundError
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain_types import EntityKind
from marketplace.core.errors import DuplicateIdempotencyKeyError, ResourceNotFoundError
from marketplace.core.idempotency_record import IdempotencyRecord
from marketplace.infrastructure.database import storage_operation
from marketplace.infrastructure.repositories.mappers import record_from_row
from marketplace.models.idempotency_record import IdempotencyRecordModel


class SqlIdempotencyRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_key(self, key: str) -> IdempotencyRecord | None:
        async with storage_operation(self._db, "idempotency.find_by_key"):
            result = await self._db.execute(
                select(IdempotencyRecordModel).where(
                    IdempotencyRecordModel.key == key,
                ),
            )
            row = result.scalar_one_or_none()
        return record_from_row(row) if row else None

    async def create(self, record: IdempotencyRecord) -> IdempotencyRecord:
        async with storage_operation(
            self._db, "idempotency.create",
            conflict=DuplicateIdempotencyKeyError(record.key),
        ):
            row = IdempotencyRecordModel(
                id=record.id,
                key=record.key,
                request=record.request,
                response=record.response,
                status_code=record.status_code,
                created_at=record.created_at,
            )
            self._db.add(row)
            await self._db.commit()
        return record_from_row(row)

    async def update(self, record: IdempotencyRecord) -> IdempotencyRecord:
        async with storage_operation(self._db, "idempotency.update"):
            row = await self._db.get(IdempotencyRecordModel, record.id)
            if row is None:
                raise ResourceNotFoundError(
                    EntityKind.IDEMPOTENCY_RECORD.value, record.id,
                )
            row.response = record.response
            row.status_code = record.status_code
            await self._db.commit()
        return record_from_row(row)
