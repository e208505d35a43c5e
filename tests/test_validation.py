"""Field validation shared by product create and update."""

from __future__ import annotations

import pytest

from inventory.domain.errors import ValidationError
from inventory.domain.services.validation import validate_product_fields

pytestmark = pytest.mark.unit


def _fields(**overrides):
    data = {"name": "Pen", "description": None, "price": 2.5, "quantity": 100, "category": "Stationery"}
    data.update(overrides)
    return data


class TestCreateRules:
    def test_valid_input_is_trimmed(self):
        fields = validate_product_fields(**_fields(name="  Pen ", category=" Stationery ", description=" blue "))
        assert fields.name == "Pen"
        assert fields.category == "Stationery"
        assert fields.description == "blue"

    def test_missing_description_defaults_to_empty(self):
        assert validate_product_fields(**_fields()).description == ""

    def test_zero_price_and_quantity_allowed(self):
        fields = validate_product_fields(**_fields(price=0, quantity=0))
        assert fields.price == 0
        assert fields.quantity == 0

    def test_numeric_strings_are_accepted(self):
        fields = validate_product_fields(**_fields(price="3.75", quantity="12"))
        assert fields.price == 3.75
        assert fields.quantity == 12

    @pytest.mark.parametrize("field", ["name", "category", "price", "quantity"])
    def test_missing_required_field(self, field):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(**{field: None}))
        assert field in exc.value.errors
        assert exc.value.message.startswith("Please provide all required fields")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(name="   "))
        assert "name" in exc.value.errors

    @pytest.mark.parametrize("price", [-0.01, -5])
    def test_negative_price_rejected(self, price):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(price=price))
        assert "price" in exc.value.errors

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(quantity=-1))
        assert "quantity" in exc.value.errors

    @pytest.mark.parametrize("price", ["abc", float("nan"), float("inf"), True])
    def test_non_numeric_price_rejected(self, price):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(price=price))
        assert exc.value.errors["price"] == "Price must be a valid number"

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(quantity=2.5))
        assert exc.value.errors["quantity"] == "Quantity must be a whole number"

    def test_all_failures_reported_together(self):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(name="", price=-1, quantity=-1, category="")
        assert set(exc.value.errors) == {"name", "category", "price", "quantity"}


class TestUpdateRules:
    @pytest.mark.parametrize("price", [0, 0.0, -1])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(price=price), strict_price=True)
        assert exc.value.errors["price"] == "Price must be a positive number"

    def test_zero_quantity_still_allowed(self):
        assert validate_product_fields(**_fields(quantity=0), strict_price=True).quantity == 0


class TestQuantityPrecision:
    def test_large_int_kept_exact(self):
        assert validate_product_fields(**_fields(quantity=2**53 + 1)).quantity == 2**53 + 1

    def test_large_numeric_string_kept_exact(self):
        assert validate_product_fields(**_fields(quantity="9007199254740993")).quantity == 9007199254740993

    @pytest.mark.parametrize("quantity, expected", [(12.0, 12), ("12.0", 12), ("1e3", 1000), (" 7 ", 7)])
    def test_integral_values_become_ints(self, quantity, expected):
        fields = validate_product_fields(**_fields(quantity=quantity))
        assert fields.quantity == expected
        assert type(fields.quantity) is int

    def test_int64_max_accepted(self):
        assert validate_product_fields(**_fields(quantity=2**63 - 1)).quantity == 2**63 - 1

    @pytest.mark.parametrize("quantity", [2**63, str(2**63), 1e19, "1e999999", "-1e999999"])
    def test_outside_int64_rejected(self, quantity):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(quantity=quantity))
        assert exc.value.errors["quantity"] == "Quantity is out of range"

    @pytest.mark.parametrize("quantity", [True, False, "abc", "nan", float("inf")])
    def test_non_numeric_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(quantity=quantity))
        assert exc.value.errors["quantity"] == "Quantity must be a valid number"

    def test_fractional_string_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(quantity="2.5"))
        assert exc.value.errors["quantity"] == "Quantity must be a whole number"

    def test_price_too_large_for_float_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_product_fields(**_fields(price=10**400))
        assert exc.value.errors["price"] == "Price must be a valid number"
