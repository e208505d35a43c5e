# inventory/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Optional, List
from datetime import datetime, timezone
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from inventory.domain.errors import DuplicateKeyError
from inventory.domain.models.product import Product, ProductFields


def to_object_id(value: str) -> Optional[ObjectId]:
    """ObjectId for a 24-hex string, None for anything else."""
    return ObjectId(value) if ObjectId.is_valid(value) else None


def duplicate_field(exc: MongoDuplicateKeyError) -> str:
    """Name of the unique key a write collided on (keyPattern from the server)."""
    pattern = (exc.details or {}).get("keyPattern") or {}
    return next(iter(pattern), "unknown")


def _to_product(doc: dict) -> Product:
    return Product(
        id=str(doc["_id"]),
        name=doc["name"],
        description=doc.get("description") or "",
        price=doc["price"],
        quantity=doc["quantity"],
        category=doc["category"],
        sku=doc["sku"],
        created_by=str(doc["createdBy"]),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


class ProductRepo:
    """
    Product repository backed by the 'products' collection.
    Documents keep the field names the web client already reads:
      { _id, name, description, price, quantity, category, sku, createdBy, createdAt, updatedAt }
    Every owner-scoped call filters on createdBy in the same query, so a product
    owned by someone else looks exactly like a missing one.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("sku", ASCENDING)], unique=True, name="uniq_sku")
        await self.col.create_index([("createdBy", ASCENDING), ("_id", ASCENDING)], name="owner_id")

    async def sku_exists(self, sku: str) -> bool:
        return await self.col.count_documents({"sku": sku}, limit=1) > 0

    async def insert(self, owner_id: str, fields: ProductFields, sku: str) -> Product:
        """
        Insert a new product. Raises DuplicateKeyError("sku") when the unique
        index rejects the write; the document is never overwritten.
        """
        now = datetime.now(timezone.utc)
        doc = {
            **fields.model_dump(),
            "sku": sku,
            "createdBy": owner_id,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            res = await self.col.insert_one(doc)
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(duplicate_field(e)) from e
        doc["_id"] = res.inserted_id
        return _to_product(doc)

    async def get(self, product_id: str) -> Optional[Product]:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        doc = await self.col.find_one({"_id": oid})
        return _to_product(doc) if doc else None

    async def get_owned(self, product_id: str, owner_id: str) -> Optional[Product]:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        doc = await self.col.find_one({"_id": oid, "createdBy": owner_id})
        return _to_product(doc) if doc else None

    async def list_by_owner(self, owner_id: str) -> List[Product]:
        # _id order == insertion order for ObjectIds; keeps listings deterministic
        cursor = self.col.find({"createdBy": owner_id}).sort("_id", ASCENDING)
        return [_to_product(doc) async for doc in cursor]

    async def update_owned(self, product_id: str, owner_id: str, fields: ProductFields) -> Optional[Product]:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        doc = await self.col.find_one_and_update(
            {"_id": oid, "createdBy": owner_id},
            {"$set": {**fields.model_dump(), "updatedAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        return _to_product(doc) if doc else None

    async def delete_owned(self, product_id: str, owner_id: str) -> bool:
        oid = to_object_id(product_id)
        if oid is None:
            return False
        res = await self.col.delete_one({"_id": oid, "createdBy": owner_id})
        return res.deleted_count == 1
