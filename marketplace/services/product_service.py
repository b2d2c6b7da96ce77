"""Product Service — create/read/update/delete products behind the idempotency runner.

Invariants:
    - The owning seller is resolved first (unknown id → ResourceNotFoundError)
      and re-validated before its snapshot is embedded in a product
    - Every write passes new_validated_product before reaching the repository
    - Update swaps the seller snapshot only when seller_id changed
    - Update/delete of an unknown id never reaches repository.update / delete

Design Decisions:
    - Same closure-over-runner shape as SellerService: replay logic lives only
      in IdempotentCommandRunner
"""

import logging
from http import HTTPStatus
from uuid import UUID

from marketplace.core.domain_types import EntityKind, ProductId
from marketplace.core.errors import ResourceNotFoundError
from marketplace.core.product import Product, new_product
from marketplace.core.repository_protocols import (
    IdempotencyRepository, ProductRepository, SellerRepository,
)
from marketplace.core.validation import (
    new_validated_product, new_validated_seller,
)
from marketplace.schemas.commands import (
    CreateProductCommand, DeleteProductCommand, DeleteResult,
    ProductResult, UpdateProductCommand,
)
from marketplace.services.idempotency import IdempotentCommandRunner, KeyedLocks
from marketplace.services.seller_service import require_seller

logger = logging.getLogger(__name__)


async def require_product(
    repository: ProductRepository, product_id: UUID,
) -> Product:
    """Load a product or raise ResourceNotFoundError."""
    product = await repository.find_by_id(ProductId(product_id))
    if product is None:
        raise ResourceNotFoundError(EntityKind.PRODUCT.value, product_id)
    return product


class ProductService:
    def __init__(
        self,
        product_repository: ProductRepository,
        seller_repository: SellerRepository,
        idempotency_repository: IdempotencyRepository,
        locks: KeyedLocks | None = None,
    ):
        self._products = product_repository
        self._sellers = seller_repository
        self._runner = IdempotentCommandRunner(idempotency_repository, locks)

    async def create_product(self, command: CreateProductCommand) -> ProductResult:
        async def operation() -> ProductResult:
            seller = new_validated_seller(
                await require_seller(self._sellers, command.seller_id),
            )
            validated = new_validated_product(
                new_product(command.name, command.price, seller),
            )
            await self._products.create(validated)
            logger.info(
                "Product created",
                extra={
                    "entity_kind": EntityKind.PRODUCT.value,
                    "entity_id": str(validated.id),
                },
            )
            return ProductResult.from_entity(validated.product)

        return await self._runner.run(
            command, ProductResult, operation, HTTPStatus.CREATED,
        )

    async def update_product(self, command: UpdateProductCommand) -> ProductResult:
        async def operation() -> ProductResult:
            product = await require_product(self._products, command.id)
            seller = None
            if command.seller_id != product.seller.id:
                seller = new_validated_seller(
                    await require_seller(self._sellers, command.seller_id),
                )
            validated = new_validated_product(
                product.revised(command.name, command.price, seller),
            )
            await self._products.update(validated)
            logger.info(
                "Product updated",
                extra={
                    "entity_kind": EntityKind.PRODUCT.value,
                    "entity_id": str(validated.id),
                },
            )
            return ProductResult.from_entity(validated.product)

        return await self._runner.run(
            command, ProductResult, operation, HTTPStatus.OK,
        )

    async def delete_product(self, command: DeleteProductCommand) -> DeleteResult:
        async def operation() -> DeleteResult:
            await require_product(self._products, command.id)
            await self._products.delete(ProductId(command.id))
            logger.info(
                "Product deleted",
                extra={
                    "entity_kind": EntityKind.PRODUCT.value,
                    "entity_id": str(command.id),
                },
            )
            return DeleteResult(success=True)

        return await self._runner.run(
            command, DeleteResult, operation, HTTPStatus.OK,
        )

    async def find_all_products(self) -> list[ProductResult]:
        return [
            ProductResult.from_entity(p) for p in await self._products.find_all()
        ]

    async def find_product_by_id(self, product_id: UUID) -> ProductResult:
        return ProductResult.from_entity(
            await require_product(self._products, product_id),
        )
