"""Seller Repository — SQLAlchemy persistence for validated sellers.

Invariants:
    - create/update accept ValidatedSeller only
    - update of an unknown id raises ResourceNotFoundError
    - delete removes the seller's products first (SQLite does not enforce
      ON DELETE CASCADE unless foreign keys are switched on)
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain_types import EntityKind, SellerId
from marketplace.core.errors import ResourceNotFoundError
from marketplace.core.seller import Seller
from marketplace.core.validation import ValidatedSeller
from marketplace.infrastructure.database import storage_operation
from marketplace.infrastructure.repositories.mappers import seller_from_row
from marketplace.models.product import ProductModel
from marketplace.models.seller import SellerModel


class SqlSellerRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, seller: ValidatedSeller) -> Seller:
        entity = seller.seller
        async with storage_operation(self._db, "seller.create"):
            row = SellerModel(
                id=entity.id,
                name=entity.name,
                created_at=entity.created_at,
                updated_at=entity.updated_at,
            )
            self._db.add(row)
            await self._db.commit()
        return seller_from_row(row)

    async def find_by_id(self, seller_id: SellerId) -> Seller | None:
        async with storage_operation(self._db, "seller.find_by_id"):
            row = await self._db.get(SellerModel, seller_id)
        return seller_from_row(row) if row else None

    async def find_all(self) -> list[Seller]:
        async with storage_operation(self._db, "seller.find_all"):
            result = await self._db.execute(
                select(SellerModel).order_by(SellerModel.created_at),
            )
            rows = result.scalars().all()
        return [seller_from_row(r) for r in rows]

    async def update(self, seller: ValidatedSeller) -> Seller:
        entity = seller.seller
        async with storage_operation(self._db, "seller.update"):
            row = await self._db.get(SellerModel, entity.id)
            if row is None:
                raise ResourceNotFoundError(EntityKind.SELLER.value, entity.id)
            row.name = entity.name
            row.updated_at = entity.updated_at
            await self._db.commit()
        return seller_from_row(row)

    async def delete(self, seller_id: SellerId) -> None:
        async with storage_operation(self._db, "seller.delete"):
            await self._db.execute(
                delete(ProductModel).where(ProductModel.seller_id == seller_id),
            )
            await self._db.execute(
                delete(SellerModel).where(SellerModel.id == seller_id),
            )
            await self._db.commit()
