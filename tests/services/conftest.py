"""Service test fixtures — in-memory repositories that count calls.

Invariants:
    - Fakes satisfy the repository Protocols structurally (no base class)
    - Each fake records how often each method was called, so tests can prove
      that a replayed command never reached the business repository
    - Every test gets its own KeyedLocks so lock bookkeeping is observable

Design Decisions:
    - Dict-backed fakes over SQLite: service semantics are tested without IO;
      tests/infrastructure covers the SQLAlchemy implementations
"""

from collections import Counter

import pytest

from marketplace.core.errors import (
    DuplicateIdempotencyKeyError, ResourceNotFoundError, StorageError,
)
from marketplace.core.idempotency_record import IdempotencyRecord
from marketplace.services.idempotency import KeyedLocks
from marketplace.services.product_service import ProductService
from marketplace.services.seller_service import SellerService


class FakeSellerRepository:
    def __init__(self):
        self.rows = {}
        self.calls = Counter()

    async def create(self, seller):
        self.calls["create"] += 1
        self.rows[seller.id] = seller.seller
        return seller.seller

    async def find_by_id(self, seller_id):
        self.calls["find_by_id"] += 1
        return self.rows.get(seller_id)

    async def find_all(self):
        self.calls["find_all"] += 1
        return list(self.rows.values())

    async def update(self, seller):
        self.calls["update"] += 1
        if seller.id not in self.rows:
            raise ResourceNotFoundError("Seller", seller.id)
        self.rows[seller.id] = seller.seller
        return seller.seller

    async def delete(self, seller_id):
        self.calls["delete"] += 1
        self.rows.pop(seller_id, None)


class FakeProductRepository:
    def __init__(self):
        self.rows = {}
        self.calls = Counter()

    async def create(self, product):
        self.calls["create"] += 1
        self.rows[product.id] = product.product
        return product.product

    async def find_by_id(self, product_id):
        self.calls["find_by_id"] += 1
        return self.rows.get(product_id)

    async def find_all(self):
        self.calls["find_all"] += 1
        return list(self.rows.values())

    async def update(self, product):
        self.calls["update"] += 1
        if product.id not in self.rows:
            raise ResourceNotFoundError("Product", product.id)
        self.rows[product.id] = product.product
        return product.product

    async def delete(self, product_id):
        self.calls["delete"] += 1
        self.rows.pop(product_id, None)


class FakeIdempotencyRepository:
    def __init__(self):
        self.rows: dict[str, IdempotencyRecord] = {}
        self.calls = Counter()

    async def find_by_key(self, key):
        self.calls["find_by_key"] += 1
        return self.rows.get(key)

    async def create(self, record):
        self.calls["create"] += 1
        if record.key in self.rows:
            raise DuplicateIdempotencyKeyError(record.key)
        self.rows[record.key] = record
        return record

    async def update(self, record):
        self.calls["update"] += 1
        self.rows[record.key] = record
        return record


class FailingWriteIdempotencyRepository(FakeIdempotencyRepository):
    """Lookups succeed, cache writes fail."""

    async def create(self, record):
        self.calls["create"] += 1
        raise StorageError("idempotency.create", "disk full")


class FailingReadIdempotencyRepository(FakeIdempotencyRepository):
    """Lookups fail."""

    async def find_by_key(self, key):
        self.calls["find_by_key"] += 1
        raise StorageError("idempotency.find_by_key", "connection lost")


@pytest.fixture
def sellers():
    return FakeSellerRepository()


@pytest.fixture
def products():
    return FakeProductRepository()


@pytest.fixture
def records():
    return FakeIdempotencyRepository()


@pytest.fixture
def locks():
    return KeyedLocks()


@pytest.fixture
def seller_service(sellers, records, locks):
    return SellerService(sellers, records, locks)


@pytest.fixture
def product_service(products, sellers, records, locks):
    return ProductService(products, sellers, records, locks)


@pytest.fixture
def failing_write_records():
    return FailingWriteIdempotencyRepository()


@pytest.fixture
def failing_read_records():
    return FailingReadIdempotencyRepository()
