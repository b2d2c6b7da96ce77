"""Product Routes — CRUD endpoints over ProductService.

Invariants:
    - POST/PUT/DELETE honour the Idempotency-Key header (body field as fallback)
    - A replayed POST still answers 201 with the original body
    - price is rendered as a decimal string so clients get the exact stored value
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from marketplace.api.dependencies import (
    get_product_service, idempotency_header, resolve_idempotency_key,
)
from marketplace.schemas.commands import (
    CreateProductCommand, DeleteProductCommand, DeleteResult,
    ProductResult, UpdateProductCommand,
)
from marketplace.schemas.product import ProductCreate, ProductUpdate
from marketplace.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.post(
    "", response_model=ProductResult, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate,
    header_key: str | None = Depends(idempotency_header),
    service: ProductService = Depends(get_product_service),
):
    return await service.create_product(CreateProductCommand(
        idempotency_key=resolve_idempotency_key(header_key, body.idempotency_key),
        name=body.name,
        price=body.price,
        seller_id=body.seller_id,
    ))


@router.get("", response_model=list[ProductResult])
async def list_products(service: ProductService = Depends(get_product_service)):
    return await service.find_all_products()


@router.get("/{product_id}", response_model=ProductResult)
async def get_product(
    product_id: UUID, service: ProductService = Depends(get_product_service),
):
    return await service.find_product_by_id(product_id)


@router.put("/{product_id}", response_model=ProductResult)
async def update_product(
    product_id: UUID,
    body: ProductUpdate,
    header_key: str | None = Depends(idempotency_header),
    service: ProductService = Depends(get_product_service),
):
    return await service.update_product(UpdateProductCommand(
        idempotency_key=resolve_idempotency_key(header_key, body.idempotency_key),
        id=product_id,
        name=body.name,
        price=body.price,
        seller_id=body.seller_id,
    ))


@router.delete("/{product_id}", response_model=DeleteResult)
async def delete_product(
    product_id: UUID,
    header_key: str | None = Depends(idempotency_header),
    service: ProductService = Depends(get_product_service),
):
    return await service.delete_product(DeleteProductCommand(
        idempotency_key=resolve_idempotency_key(header_key),
        id=product_id,
    ))
