# inventory/domain/repositories/user_repo.py

from __future__ import annotations
from typing import Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from inventory.domain.errors import DuplicateKeyError
from inventory.domain.models.user import User
from inventory.domain.repositories.product_repo import duplicate_field


def _to_user(doc: dict) -> User:
    return User(
        id=str(doc["_id"]),
        username=doc["username"],
        email=doc["email"],
        password_hash=doc["password"],
        created_at=doc.get("createdAt"),
    )


class UserRepo:
    """Accounts in the 'users' collection; email and username are unique."""

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "users"):
        self.col = db[collection_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("email", ASCENDING)], unique=True, name="uniq_email")
        await self.col.create_index([("username", ASCENDING)], unique=True, name="uniq_username")

    async def get_by_email(self, email: str) -> Optional[User]:
        doc = await self.col.find_one({"email": email})
        return _to_user(doc) if doc else None

    async def exists(self, *, email: str, username: str) -> bool:
        query = {"$or": [{"email": email}, {"username": username}]}
        return await self.col.count_documents(query, limit=1) > 0

    async def insert(self, *, username: str, email: str, password_hash: str) -> User:
        doc = {
            "username": username,
            "email": email,
            "password": password_hash,
            "createdAt": datetime.now(timezone.utc),
        }
        try:
            res = await self.col.insert_one(doc)
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(duplicate_field(e)) from e
        doc["_id"] = res.inserted_id
        return _to_user(doc)
