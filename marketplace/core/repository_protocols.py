"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Write methods accept only validated wrappers, never raw entities
    - find_by_id / find_by_key return None for unknown ids; every other
      failure is raised (StorageError), never returned
    - IdempotencyRepository.create raises DuplicateIdempotencyKeyError when
      the key exists; update raises ResourceNotFoundError for unknown ids

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async in Protocol: implementations do IO; the pure checks they are fed
      are never async
"""

from typing import Protocol

from marketplace.core.domain_types import ProductId, SellerId
from marketplace.core.idempotency_record import IdempotencyRecord
from marketplace.core.product import Product
from marketplace.core.seller import Seller
from marketplace.core.validation import ValidatedProduct, ValidatedSeller


class SellerRepository(Protocol):
    """Contract for seller persistence — implemented by shell."""
    async def create(self, seller: ValidatedSeller) -> Seller: ...
    async def find_by_id(self, seller_id: SellerId) -> Seller | None: ...
    async def find_all(self) -> list[Seller]: ...
    async def update(self, seller: ValidatedSeller) -> Seller: ...
    async def delete(self, seller_id: SellerId) -> None: ...


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def create(self, product: ValidatedProduct) -> Product: ...
    async def find_by_id(self, product_id: ProductId) -> Product | None: ...
    async def find_all(self) -> list[Product]: ...
    async def update(self, product: ValidatedProduct) -> Product: ...
    async def delete(self, product_id: ProductId) -> None: ...


class IdempotencyRepository(Protocol):
    """Contract for the idempotency store — implemented by shell."""
    async def find_by_key(self, key: str) -> IdempotencyRecord | None: ...
    async def create(self, record: IdempotencyRecord) -> IdempotencyRecord: ...
    async def update(self, record: IdempotencyRecord) -> IdempotencyRecord: ...
