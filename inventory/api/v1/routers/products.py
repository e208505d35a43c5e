# inventory/api/v1/routers/products.py

from fastapi import APIRouter, status
import time

from inventory.api.deps import ProductIdDep, ProductRepoDep, SettingsDep, UserIdDep
from inventory.api.v1.schemas.product import (
    MessageEnvelope,
    ProductEnvelope,
    ProductIn,
    ProductListEnvelope,
    ProductOut,
)
from inventory.domain.services.product_svc import (
    create_product_svc,
    delete_product_svc,
    get_any_product_svc,
    get_product_svc,
    list_products_svc,
    update_product_svc,
)

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.post(
    "/products",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    summary="Create a product owned by the caller (SKU is generated)",
)
async def create_product(user_id: UserIdDep, payload: ProductIn, repo: ProductRepoDep, settings: SettingsDep):
    logger.info("Request: create_product user_id=%s name=%r category=%r", user_id, payload.name, payload.category)
    start_time = time.perf_counter()

    product = await create_product_svc(
        repo,
        user_id,
        **payload.model_dump(),
        max_attempts=settings.SKU_MAX_ATTEMPTS,
    )

    logger.info("Response: create_product id=%s sku=%s elapsed_time=%.4fs", product.id, product.sku, time.perf_counter() - start_time)
    return ProductEnvelope(message="Product created successfully", product=ProductOut.from_domain(product))


@router.get(
    "/products",
    response_model=ProductListEnvelope,
    summary="List the caller's products (ascending by id)",
)
async def list_products(user_id: UserIdDep, repo: ProductRepoDep):
    products = await list_products_svc(repo, user_id)
    return ProductListEnvelope(products=[ProductOut.from_domain(p) for p in products], count=len(products))


@router.get(
    "/products/{product_id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    summary="Fetch one product",
)
async def get_product(user_id: UserIdDep, product_id: ProductIdDep, repo: ProductRepoDep, settings: SettingsDep):
    """
    Owner-scoped by default: another user's product answers 404.
    With PUBLIC_PRODUCT_READS=true any authenticated caller can read any product.
    """
    if settings.PUBLIC_PRODUCT_READS:
        product = await get_any_product_svc(repo, product_id)
    else:
        product = await get_product_svc(repo, user_id, product_id)
    return ProductEnvelope(product=ProductOut.from_domain(product))


@router.put(
    "/products/{product_id}",
    response_model=ProductEnvelope,
    response_model_exclude_none=True,
    summary="Replace name/description/price/quantity/category of an owned product",
)
async def update_product(user_id: UserIdDep, product_id: ProductIdDep, payload: ProductIn, repo: ProductRepoDep):
    logger.info("Request: update_product id=%s user_id=%s", product_id, user_id)
    product = await update_product_svc(repo, user_id, product_id, **payload.model_dump())
    return ProductEnvelope(message="Product updated successfully", product=ProductOut.from_domain(product))


@router.delete(
    "/products/{product_id}",
    response_model=MessageEnvelope,
    summary="Permanently delete an owned product",
)
async def delete_product(user_id: UserIdDep, product_id: ProductIdDep, repo: ProductRepoDep):
    logger.info("Request: delete_product id=%s user_id=%s", product_id, user_id)
    await delete_product_svc(repo, user_id, product_id)
    return MessageEnvelope(message="Product deleted successfully")
