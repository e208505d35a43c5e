# inventory/api/v1/schemas/product.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, List, Optional

from inventory.domain.models.product import Product

class ProductIn(BaseModel):
    # All optional at the schema level: missing/empty values are reported
    # field by field by the service validation, with the same messages for both routes.
    # price / quantity stay untyped so no lax coercion (true -> 1, "5" -> 5) happens first.
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Any] = None
    quantity: Optional[Any] = None
    category: Optional[str] = None

class ProductOut(BaseModel):
    id: str
    name: str
    description: str = ""
    price: float
    quantity: int
    category: str
    sku: str
    created_by: str = Field(serialization_alias="createdBy")
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, serialization_alias="updatedAt")

    @classmethod
    def from_domain(cls, product: Product) -> "ProductOut":
        return cls(**product.model_dump())

class ProductEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    product: ProductOut

class ProductListEnvelope(BaseModel):
    success: bool = True
    products: List[ProductOut]
    count: int

class MessageEnvelope(BaseModel):
    success: bool = True
    message: str
