from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class Product(BaseModel):
    id: str
    name: str
    description: str = ""
    price: float
    quantity: int
    category: str
    sku: str
    created_by: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}  # sku / created_by never change after insert

class ProductFields(BaseModel):
    """Validated, trimmed values for create/update (see services/validation.py)."""
    name: str
    description: str = ""
    price: float
    quantity: int
    category: str

    model_config = {"frozen": True}
