"""Product Repository — SQLAlchemy persistence for validated products.

Invariants:
    - create/update accept ValidatedProduct only
    - the stored seller_id is taken from the product's seller snapshot
    - returned products carry the seller as currently stored
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain_types import EntityKind, ProductId
from marketplace.core.errors import ResourceNotFoundError
from marketplace.core.product import Product
from marketplace.core.validation import ValidatedProduct
from marketplace.infrastructure.database import storage_operation
from marketplace.infrastructure.repositories.mappers import product_from_row
from marketplace.models.product import ProductModel


class SqlProductRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def _load(self, product_id: ProductId) -> ProductModel | None:
        result = await self._db.execute(
            select(ProductModel).where(ProductModel.id == product_id),
        )
        return result.scalar_one_or_none()

    async def create(self, product: ValidatedProduct) -> Product:
        entity = product.product
        async with storage_operation(self._db, "product.create"):
            row = ProductModel(
                id=entity.id,
                name=entity.name,
                price=entity.price,
                seller_id=entity.seller.id,
                created_at=entity.created_at,
                updated_at=entity.updated_at,
            )
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row, attribute_names=["seller"])
        return product_from_row(row)

    async def find_by_id(self, product_id: ProductId) -> Product | None:
        async with storage_operation(self._db, "product.find_by_id"):
            row = await self._load(product_id)
        return product_from_row(row) if row else None

    async def find_all(self) -> list[Product]:
        async with storage_operation(self._db, "product.find_all"):
            result = await self._db.execute(
                select(ProductModel).order_by(ProductModel.created_at),
            )
            rows = result.scalars().all()
        return [product_from_row(r) for r in rows]

    async def update(self, product: ValidatedProduct) -> Product:
        entity = product.product
        async with storage_operation(self._db, "product.update"):
            row = await self._load(entity.id)
            if row is None:
                raise ResourceNotFoundError(EntityKind.PRODUCT.value, entity.id)
            row.name = entity.name
            row.price = entity.price
            row.seller_id = entity.seller.id
            row.updated_at = entity.updated_at
            await self._db.commit()
            # refresh the relationship when the seller changed
            await self._db.refresh(row, attribute_names=["seller"])
        return product_from_row(row)

    async def delete(self, product_id: ProductId) -> None:
        async with storage_operation(self._db, "product.delete"):
            await self._db.execute(
                delete(ProductModel).where(ProductModel.id == product_id),
            )
            await self._db.commit()
