# inventory/domain/services/product_svc.py
import logging
import time
from typing import Any, List, Optional

from inventory.domain.errors import ConflictError, DuplicateKeyError, NotFoundError
from inventory.domain.models.product import Product
from inventory.domain.repositories.product_repo import ProductRepo
from inventory.domain.services.sku_svc import DEFAULT_MAX_ATTEMPTS, generate_sku
from inventory.domain.services.validation import validate_product_fields

logger = logging.getLogger(__name__)

NOT_FOUND_MSG = "Product not found"
NOT_FOUND_OR_UNAUTHORIZED_MSG = "Product not found or unauthorized"


async def create_product_svc(
    repo: ProductRepo,
    user_id: str,
    *,
    name: Any,
    description: Any = None,
    price: Any,
    quantity: Any,
    category: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Product:
    """
    Validate, assign a fresh SKU and insert the product owned by `user_id`.
    A duplicate-key rejection from the store (two creations racing on the same
    code) costs one attempt and draws a new SKU; ConflictError once the budget is spent.
    """
    t0 = time.perf_counter()
    fields = validate_product_fields(
        name=name, description=description, price=price, quantity=quantity, category=category,
    )
    logger.info("product.create start user_id=%s category=%r", user_id, fields.category)

    # One budget for both failure modes: every candidate costs one store lookup,
    # whether it then collides on the lookup or on the insert.
    lookups = 0

    async def counted_sku_exists(sku: str) -> bool:
        nonlocal lookups
        lookups += 1
        return await repo.sku_exists(sku)

    while lookups < max_attempts:
        sku = await generate_sku(fields.category, counted_sku_exists, max_attempts=max_attempts - lookups)
        try:
            product = await repo.insert(user_id, fields, sku)
        except DuplicateKeyError as e:
            if e.field != "sku":
                raise
            logger.warning("product.create duplicate sku=%s attempt=%s/%s", sku, lookups, max_attempts)
            continue
        logger.info(
            "product.create done id=%s sku=%s time=%.3fs", product.id, product.sku, time.perf_counter() - t0,
        )
        return product

    raise ConflictError("Error creating product. Please try again.", error="Duplicate SKU generated")


async def list_products_svc(repo: ProductRepo, user_id: str) -> List[Product]:
    products = await repo.list_by_owner(user_id)
    logger.info("product.list user_id=%s count=%s", user_id, len(products))
    return products


async def get_product_svc(repo: ProductRepo, user_id: str, product_id: str) -> Product:
    """Owner-scoped read: someone else's product is reported exactly like a missing one."""
    product = await repo.get_owned(product_id, user_id)
    if product is None:
        raise NotFoundError(NOT_FOUND_MSG)
    return product


async def get_any_product_svc(repo: ProductRepo, product_id: str) -> Product:
    """Unscoped read, ignores ownership. Only routed when PUBLIC_PRODUCT_READS is on."""
    product = await repo.get(product_id)
    if product is None:
        raise NotFoundError(NOT_FOUND_MSG)
    return product


async def update_product_svc(
    repo: ProductRepo,
    user_id: str,
    product_id: str,
    *,
    name: Any,
    description: Any = None,
    price: Any,
    quantity: Any,
    category: Any,
) -> Product:
    """
    Replace the editable fields of an owned product. Price must be strictly
    positive here (create allows zero). sku, id and createdBy are never touched.
    """
    fields = validate_product_fields(
        name=name, description=description, price=price, quantity=quantity, category=category,
        strict_price=True,
    )
    product: Optional[Product] = await repo.update_owned(product_id, user_id, fields)
    if product is None:
        logger.info("product.update miss id=%s user_id=%s", product_id, user_id)
        raise NotFoundError(NOT_FOUND_OR_UNAUTHORIZED_MSG)
    logger.info("product.update done id=%s", product.id)
    return product


async def delete_product_svc(repo: ProductRepo, user_id: str, product_id: str) -> None:
    if not await repo.delete_owned(product_id, user_id):
        logger.info("product.delete miss id=%s user_id=%s", product_id, user_id)
        raise NotFoundError(NOT_FOUND_OR_UNAUTHORIZED_MSG)
    logger.info("product.delete done id=%s", product_id)
