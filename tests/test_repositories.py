"""Mongo document mapping helpers (no server needed)."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

from inventory.domain.repositories.product_repo import _to_product, duplicate_field, to_object_id

pytestmark = pytest.mark.unit


def test_to_object_id():
    oid = ObjectId()
    assert to_object_id(str(oid)) == oid
    assert to_object_id("123") is None
    assert to_object_id("z" * 24) is None


def test_duplicate_field_reads_key_pattern():
    exc = MongoDuplicateKeyError("E11000", code=11000, details={"keyPattern": {"sku": 1}, "keyValue": {"sku": "X"}})
    assert duplicate_field(exc) == "sku"
    assert duplicate_field(MongoDuplicateKeyError("E11000", code=11000)) == "unknown"


def test_document_maps_to_product():
    oid, now = ObjectId(), datetime.now(timezone.utc)
    doc = {
        "_id": oid, "name": "Pen", "price": 2.5, "quantity": 100, "category": "Stationery",
        "sku": "STA-1234-001", "createdBy": "owner-1", "createdAt": now, "updatedAt": now,
    }
    product = _to_product(doc)
    assert product.id == str(oid)
    assert product.description == ""  # absent in the document
    assert product.created_by == "owner-1"
    assert product.created_at == now
