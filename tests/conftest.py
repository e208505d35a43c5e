"""Shared fixtures: in-memory repositories standing in for the Motor collections."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Dict, List, Optional

# Required settings must exist before inventory.main builds the app at import time
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-0123456789abcdef0123456789")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from inventory.api import deps
from inventory.core.config import Settings, get_settings
from inventory.core.security import create_access_token
from inventory.domain.errors import DuplicateKeyError
from inventory.domain.models.product import Product, ProductFields
from inventory.domain.models.user import User


class InMemoryProductRepo:
    """Same contract as ProductRepo, including the unique index on sku."""

    def __init__(self):
        self.docs: Dict[str, Product] = {}
        # Number of upcoming inserts to reject as if another writer took the sku first
        self.reject_next_inserts = 0
        self.insert_calls = 0

    async def sku_exists(self, sku: str) -> bool:
        return any(p.sku == sku for p in self.docs.values())

    async def insert(self, owner_id: str, fields: ProductFields, sku: str) -> Product:
        self.insert_calls += 1
        if self.reject_next_inserts > 0:
            self.reject_next_inserts -= 1
            raise DuplicateKeyError("sku")
        if await self.sku_exists(sku):
            raise DuplicateKeyError("sku")
        now = datetime.now(timezone.utc)
        product = Product(
            id=str(ObjectId()),
            sku=sku,
            created_by=owner_id,
            created_at=now,
            updated_at=now,
            **fields.model_dump(),
        )
        self.docs[product.id] = product
        return product

    async def get(self, product_id: str) -> Optional[Product]:
        return self.docs.get(product_id)

    async def get_owned(self, product_id: str, owner_id: str) -> Optional[Product]:
        product = self.docs.get(product_id)
        return product if product and product.created_by == owner_id else None

    async def list_by_owner(self, owner_id: str) -> List[Product]:
        return sorted((p for p in self.docs.values() if p.created_by == owner_id), key=lambda p: p.id)

    async def update_owned(self, product_id: str, owner_id: str, fields: ProductFields) -> Optional[Product]:
        product = await self.get_owned(product_id, owner_id)
        if product is None:
            return None
        updated = product.model_copy(update={**fields.model_dump(), "updated_at": datetime.now(timezone.utc)})
        self.docs[product_id] = updated
        return updated

    async def delete_owned(self, product_id: str, owner_id: str) -> bool:
        if await self.get_owned(product_id, owner_id) is None:
            return False
        del self.docs[product_id]
        return True


class InMemoryUserRepo:
    def __init__(self):
        self.users: Dict[str, User] = {}

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def exists(self, *, email: str, username: str) -> bool:
        return any(u.email == email or u.username == username for u in self.users.values())

    async def insert(self, *, username: str, email: str, password_hash: str) -> User:
        for user in self.users.values():
            if user.email == email:
                raise DuplicateKeyError("email")
            if user.username == username:
                raise DuplicateKeyError("username")
        user = User(id=str(ObjectId()), username=username, email=email, password_hash=password_hash)
        self.users[user.id] = user
        return user


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        MONGO_URI="mongodb://localhost:27017",
        JWT_SECRET="test-jwt-secret-0123456789abcdef0123456789",
        JWT_EXPIRES_MINUTES=5,
    )


@pytest.fixture()
def product_repo() -> InMemoryProductRepo:
    return InMemoryProductRepo()


@pytest.fixture()
def user_repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture()
def app(settings, product_repo, user_repo):
    from inventory.main import create_app

    application = create_app()
    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[deps.product_repo] = lambda: product_repo
    application.dependency_overrides[deps.user_repo] = lambda: user_repo
    return application


@pytest.fixture()
def client(app) -> TestClient:
    # Not entered as a context manager: lifespan (Mongo connect) is skipped
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def user1_id() -> str:
    return str(ObjectId())


@pytest.fixture()
def user2_id() -> str:
    return str(ObjectId())


@pytest.fixture()
def auth_headers(settings):
    def _headers(user_id: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id, settings)}"}

    return _headers
