"""Seller Service — create/read/update/delete sellers behind the idempotency runner.

Invariants:
    - Every write passes new_validated_seller before reaching the repository
    - Update builds a renamed candidate: a rejected name leaves the stored
      seller and the loaded entity untouched
    - Update/delete of an unknown id raises ResourceNotFoundError and never
      reaches repository.update / repository.delete
    - Results are built from the validated entity, not re-read from storage

Design Decisions:
    - Operations are closures handed to IdempotentCommandRunner.run: the
      replay short-circuit sits in one place for all six commands
"""

import logging
from http import HTTPStatus
from uuid import UUID

from marketplace.core.domain_types import EntityKind, SellerId
from marketplace.core.errors import ResourceNotFoundError
from marketplace.core.repository_protocols import (
    IdempotencyRepository, SellerRepository,
)
from marketplace.core.seller import Seller, new_seller
from marketplace.core.validation import new_validated_seller
from marketplace.schemas.commands import (
    CreateSellerCommand, DeleteResult, DeleteSellerCommand,
    SellerResult, UpdateSellerCommand,
)
from marketplace.services.idempotency import IdempotentCommandRunner, KeyedLocks

logger = logging.getLogger(__name__)


async def require_seller(repository: SellerRepository, seller_id: UUID) -> Seller:
    """Load a seller or raise ResourceNotFoundError."""
    seller = await repository.find_by_id(SellerId(seller_id))
    if seller is None:
        raise ResourceNotFoundError(EntityKind.SELLER.value, seller_id)
    return seller


class SellerService:
    def __init__(
        self,
        seller_repository: SellerRepository,
        idempotency_repository: IdempotencyRepository,
        locks: KeyedLocks | None = None,
    ):
        self._sellers = seller_repository
        self._runner = IdempotentCommandRunner(idempotency_repository, locks)

    async def create_seller(self, command: CreateSellerCommand) -> SellerResult:
        async def operation() -> SellerResult:
            validated = new_validated_seller(new_seller(command.name))
            await self._sellers.create(validated)
            logger.info(
                "Seller created",
                extra={
                    "entity_kind": EntityKind.SELLER.value,
                    "entity_id": str(validated.id),
                },
            )
            return SellerResult.from_entity(validated.seller)

        return await self._runner.run(
            command, SellerResult, operation, HTTPStatus.CREATED,
        )

    async def update_seller(self, command: UpdateSellerCommand) -> SellerResult:
        async def operation() -> SellerResult:
            seller = await require_seller(self._sellers, command.id)
            validated = new_validated_seller(seller.renamed(command.name))
            await self._sellers.update(validated)
            logger.info(
                "Seller updated",
                extra={
                    "entity_kind": EntityKind.SELLER.value,
                    "entity_id": str(validated.id),
                },
            )
            return SellerResult.from_entity(validated.seller)

        return await self._runner.run(
            command, SellerResult, operation, HTTPStatus.OK,
        )

    async def delete_seller(self, command: DeleteSellerCommand) -> DeleteResult:
        async def operation() -> DeleteResult:
            await require_seller(self._sellers, command.id)
            await self._sellers.delete(SellerId(command.id))
            logger.info(
                "Seller deleted",
                extra={
                    "entity_kind": EntityKind.SELLER.value,
                    "entity_id": str(command.id),
                },
            )
            return DeleteResult(success=True)

        return await self._runner.run(
            command, DeleteResult, operation, HTTPStatus.OK,
        )

    async def find_all_sellers(self) -> list[SellerResult]:
        return [SellerResult.from_entity(s) for s in await self._sellers.find_all()]

    async def find_seller_by_id(self, seller_id: UUID) -> SellerResult:
        return SellerResult.from_entity(
            await require_seller(self._sellers, seller_id),
        )
