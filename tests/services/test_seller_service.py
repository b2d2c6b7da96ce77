"""Seller Service — CRUD through the idempotency runner with fake repositories.

Invariants:
    - invalid names never reach the repository
    - update/delete of an unknown id raise ResourceNotFoundError and never
      call repository.update / repository.delete
    - a rejected rename leaves the stored seller untouched
"""

from uuid import uuid4

import pytest

from marketplace.core.errors import ResourceNotFoundError, ValidationFailedError
from marketplace.schemas.commands import (
    CreateSellerCommand, DeleteSellerCommand, UpdateSellerCommand,
)


async def test_create_seller_persists_and_returns_result(seller_service, sellers):
    result = await seller_service.create_seller(CreateSellerCommand(name="John Doe"))
    assert result.name == "John Doe"
    assert result.created_at == result.updated_at
    assert sellers.rows[result.id].name == "John Doe"


async def test_create_seller_with_empty_name_fails(seller_service, sellers):
    with pytest.raises(ValidationFailedError):
        await seller_service.create_seller(CreateSellerCommand(name=""))
    assert sellers.calls["create"] == 0


async def test_create_seller_replays_with_same_key(seller_service, sellers):
    command = CreateSellerCommand(idempotency_key="abc", name="John Doe")
    first = await seller_service.create_seller(command)
    second = await seller_service.create_seller(command)
    assert second == first
    assert sellers.calls["create"] == 1
    assert len(sellers.rows) == 1


async def test_failed_create_is_not_cached(seller_service, records):
    with pytest.raises(ValidationFailedError):
        await seller_service.create_seller(
            CreateSellerCommand(idempotency_key="abc", name=""),
        )
    assert "abc" not in records.rows


async def test_update_seller_renames(seller_service, sellers):
    created = await seller_service.create_seller(CreateSellerCommand(name="John Doe"))
    updated = await seller_service.update_seller(
        UpdateSellerCommand(id=created.id, name="Jane Doe"),
    )
    assert updated.name == "Jane Doe"
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert sellers.rows[created.id].name == "Jane Doe"


async def test_update_unknown_seller_raises_not_found(seller_service, sellers):
    with pytest.raises(ResourceNotFoundError):
        await seller_service.update_seller(
            UpdateSellerCommand(id=uuid4(), name="Jane Doe"),
        )
    assert sellers.calls["update"] == 0


async def test_rejected_rename_leaves_seller_unchanged(seller_service, sellers):
    created = await seller_service.create_seller(CreateSellerCommand(name="John Doe"))
    with pytest.raises(ValidationFailedError):
        await seller_service.update_seller(
            UpdateSellerCommand(id=created.id, name="  "),
        )
    assert sellers.rows[created.id].name == "John Doe"
    assert sellers.calls["update"] == 0


async def test_delete_seller(seller_service, sellers):
    created = await seller_service.create_seller(CreateSellerCommand(name="John Doe"))
    result = await seller_service.delete_seller(DeleteSellerCommand(id=created.id))
    assert result.success is True
    assert created.id not in sellers.rows


async def test_delete_unknown_seller_raises_not_found(seller_service, sellers):
    with pytest.raises(ResourceNotFoundError):
        await seller_service.delete_seller(DeleteSellerCommand(id=uuid4()))
    assert sellers.calls["delete"] == 0


async def test_repeated_delete_with_key_replays_success(seller_service, sellers):
    created = await seller_service.create_seller(CreateSellerCommand(name="John Doe"))
    command = DeleteSellerCommand(idempotency_key="del-1", id=created.id)
    await seller_service.delete_seller(command)
    again = await seller_service.delete_seller(command)
    assert again.success is True
    assert sellers.calls["delete"] == 1


async def test_find_all_and_by_id(seller_service):
    a = await seller_service.create_seller(CreateSellerCommand(name="A"))
    b = await seller_service.create_seller(CreateSellerCommand(name="B"))
    assert {s.id for s in await seller_service.find_all_sellers()} == {a.id, b.id}
    assert (await seller_service.find_seller_by_id(a.id)) == a


async def test_find_unknown_seller_raises_not_found(seller_service):
    with pytest.raises(ResourceNotFoundError):
        await seller_service.find_seller_by_id(uuid4())
