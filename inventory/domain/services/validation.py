# inventory/domain/services/validation.py
"""
Field checks shared by product create and update.
Create accepts price >= 0; update requires price > 0. The two rules are
deliberately different and selected with `strict_price`.
"""
from __future__ import annotations
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union

from inventory.domain.errors import ValidationError
from inventory.domain.models.product import ProductFields

REQUIRED_FIELDS = ("name", "price", "quantity", "category")

# Mongo stores ints as BSON int64
INT64_MAX = 2**63 - 1


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _number(value: Any) -> Optional[float]:
    """Float for ints/floats/numeric strings; None for anything else (bool, NaN, inf included)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            num = float(value)
        elif isinstance(value, str):
            num = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return num if math.isfinite(num) else None


def _integer(value: Any) -> Union[int, str]:
    """
    Exact int for ints, integral floats and numeric strings ("12", "12.0", "1e3").
    Returns an error message instead when the value is not a whole number in int64 range.
    """
    if isinstance(value, bool):
        return "Quantity must be a valid number"
    if isinstance(value, int):
        num = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return "Quantity must be a valid number"
        if not value.is_integer():
            return "Quantity must be a whole number"
        num = int(value)
    elif isinstance(value, str):
        try:
            dec = Decimal(value.strip())
        except InvalidOperation:
            return "Quantity must be a valid number"
        if not dec.is_finite():
            return "Quantity must be a valid number"
        if abs(dec) > INT64_MAX:  # checked before int(): "1e999999" would build a huge int
            return "Quantity is out of range"
        if dec != dec.to_integral_value():
            return "Quantity must be a whole number"
        num = int(dec)
    else:
        return "Quantity must be a valid number"

    if num > INT64_MAX:
        return "Quantity is out of range"
    return num


def validate_product_fields(
    *,
    name: Any,
    description: Any = None,
    price: Any,
    quantity: Any,
    category: Any,
    strict_price: bool = False,
) -> ProductFields:
    """
    Check and normalise product input. Raises ValidationError with one message
    per failing field; returns trimmed values otherwise.
    """
    errors: Dict[str, str] = {}

    clean_name = _text(name)
    clean_category = _text(category)
    if not clean_name:
        errors["name"] = "Name is required"
    if not clean_category:
        errors["category"] = "Category is required"
    if description is not None and not isinstance(description, str):
        errors["description"] = "Description must be text"

    num_price = _number(price)
    if price is None:
        errors["price"] = "Price is required"
    elif num_price is None:
        errors["price"] = "Price must be a valid number"
    elif strict_price and num_price <= 0:
        errors["price"] = "Price must be a positive number"
    elif num_price < 0:
        errors["price"] = "Price must be zero or greater"

    num_quantity = _integer(quantity) if quantity is not None else None
    if quantity is None:
        errors["quantity"] = "Quantity is required"
    elif isinstance(num_quantity, str):
        errors["quantity"] = num_quantity
    elif num_quantity < 0:
        errors["quantity"] = "Quantity must be zero or greater"

    if errors:
        missing = [f for f in REQUIRED_FIELDS if errors.get(f, "").endswith("is required")]
        message = (
            "Please provide all required fields: name, price, quantity, and category"
            if missing else "Invalid product data"
        )
        raise ValidationError(errors, message=message)

    return ProductFields(
        name=clean_name,
        description=_text(description),
        price=num_price,
        quantity=num_quantity,
        category=clean_category,
    )
