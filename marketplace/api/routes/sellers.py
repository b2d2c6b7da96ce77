"""Seller Routes — CRUD endpoints over SellerService.

Invariants:
    - POST/PUT/DELETE honour the Idempotency-Key header (body field as fallback)
    - Routes only translate HTTP ↔ commands; errors propagate to the global
      handlers (422 invalid, 404 unknown id, 409 key conflict, 503 storage)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from marketplace.api.dependencies import (
    get_seller_service, idempotency_header, resolve_idempotency_key,
)
from marketplace.schemas.commands import (
    CreateSellerCommand, DeleteResult, DeleteSellerCommand,
    SellerResult, UpdateSellerCommand,
)
from marketplace.schemas.seller import SellerCreate, SellerUpdate
from marketplace.services.seller_service import SellerService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sellers", tags=["sellers"])


@router.post(
    "", response_model=SellerResult, status_code=status.HTTP_201_CREATED,
)
async def create_seller(
    body: SellerCreate,
    header_key: str | None = Depends(idempotency_header),
    service: SellerService = Depends(get_seller_service),
):
    return await service.create_seller(CreateSellerCommand(
        idempotency_key=resolve_idempotency_key(header_key, body.idempotency_key),
        name=body.name,
    ))


@router.get("", response_model=list[SellerResult])
async def list_sellers(service: SellerService = Depends(get_seller_service)):
    return await service.find_all_sellers()


@router.get("/{seller_id}", response_model=SellerResult)
async def get_seller(
    seller_id: UUID, service: SellerService = Depends(get_seller_service),
):
    return await service.find_seller_by_id(seller_id)


@router.put("/{seller_id}", response_model=SellerResult)
async def update_seller(
    seller_id: UUID,
    body: SellerUpdate,
    header_key: str | None = Depends(idempotency_header),
    service: SellerService = Depends(get_seller_service),
):
    return await service.update_seller(UpdateSellerCommand(
        idempotency_key=resolve_idempotency_key(header_key, body.idempotency_key),
        id=seller_id,
        name=body.name,
    ))


@router.delete("/{seller_id}", response_model=DeleteResult)
async def delete_seller(
    seller_id: UUID,
    header_key: str | None = Depends(idempotency_header),
    service: SellerService = Depends(get_seller_service),
):
    return await service.delete_seller(DeleteSellerCommand(
        idempotency_key=resolve_idempotency_key(header_key),
        id=seller_id,
    ))
