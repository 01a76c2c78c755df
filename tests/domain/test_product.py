"""Unit tests for the Product aggregate and its derived fields."""

from decimal import ROUND_HALF_UP, Decimal

import pytest

from invoicer.domain.exceptions import ValidationError
from invoicer.domain.model.product import TAX_RATE, Product


class TestProductCreation:

    def test_widget_totals(self):
        product = Product.create(owner_id=1, name="Widget", quantity=3, rate="10.00")
        assert product.total.to_plain() == "30.00"
        assert product.tax_amount.to_plain() == "5.40"
        assert product.id is None  # assigned by repository

    def test_name_is_stripped(self):
        product = Product.create(1, "  Widget  ", 1, "1.00")
        assert product.name == "Widget"

    @pytest.mark.parametrize(
        "quantity, rate",
        [(1, "0.01"), (7, "19.99"), (3, "33.33"), (250, "1.15"), (12, "1234.56")],
    )
    def test_total_and_tax_have_exactly_two_places(self, quantity, rate):
        product = Product.create(1, "Thing", quantity, rate)
        expected_total = Decimal(rate) * quantity
        assert product.total.amount == expected_total
        expected_tax = (expected_total * TAX_RATE).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        assert product.tax_amount.amount == expected_tax
        assert product.total.amount.as_tuple().exponent == -2
        assert product.tax_amount.amount.as_tuple().exponent == -2

    def test_tax_rate_is_eighteen_percent(self):
        assert TAX_RATE == Decimal("0.18")


class TestProductValidation:

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            Product.create(1, "   ", 1, "1.00")

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            Product.create(1, "Widget", 0, "1.00")

    def test_zero_rate_rejected(self):
        with pytest.raises(ValidationError, match="Rate must be a positive number"):
            Product.create(1, "Widget", 1, "0")

    def test_rate_rounding_to_zero_rejected(self):
        with pytest.raises(ValidationError, match="Rate must be a positive number"):
            Product.create(1, "Widget", 1, "0.004")

    @pytest.mark.parametrize("rate", ["-5", "abc", "NaN", "", 10.5])
    def test_bad_rate_reports_the_rate_field(self, rate):
        with pytest.raises(ValidationError, match="^Rate must be a positive number$"):
            Product.create(1, "Widget", 1, rate)

    def test_first_violation_reported(self):
        with pytest.raises(ValidationError, match="Quantity"):
            Product.create(1, "Widget", 0, "abc")


class TestProductImmutability:

    def test_fields_cannot_be_reassigned(self):
        product = Product.create(1, "Widget", 3, "10.00")
        with pytest.raises(AttributeError):
            product.total = product.rate  # type: ignore[misc]
