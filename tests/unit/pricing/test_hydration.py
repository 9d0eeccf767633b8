"""Unit tests for hydration and submission projection

Tests cover:
- Persisted items with string numbers become engine line items
- Server-computed totals are re-derived
- tax_rate fraction <-> percentage conversion at the persistence boundary
- Reduced submission payload per order type
"""

import pytest
from decimal import Decimal

from src.app.pricing.engine import PurchaseOrderPricing, SalesOrderPricing
from src.app.pricing.hydration import hydrate_adjustments, hydrate_lines, to_submission


@pytest.fixture
def sales_engine():
    return SalesOrderPricing(default_currency="USD")


@pytest.fixture
def purchase_engine():
    return PurchaseOrderPricing(default_currency="USD")


class TestHydrateLines:
    """Persisted items -> engine line items"""

    def test_hydrates_sales_items_with_string_numbers(self, sales_engine):
        """
        Given: A persisted sales order item serialized with string numbers
        When: It is hydrated
        Then: Numbers are parsed and totals re-derived by the engine
        """
        # Arrange
        items = [
            {
                "product_id": "4",
                "product_sku": "SKU-004",
                "product_name": "Desk lamp",
                "quantity_ordered": "2",
                "unit_price": "15.5000",
                "discount_percentage": "10.00",
                "line_total": "999.00",
                "final_line_total": "999.00",
                "requested_delivery_date": "2024-09-01T00:00:00.000000Z",
                "notes": None,
                "customer_notes": "Leave at door",
            }
        ]

        # Act
        lines = hydrate_lines(sales_engine, items)

        # Assert
        assert len(lines) == 1
        line = lines[0]
        assert line.product_id == 4
        assert line.quantity == 2
        assert line.unit_price == Decimal("15.5")
        assert line.discount_percentage == Decimal("10")
        assert line.line_total == Decimal("31")
        assert line.final_line_total == Decimal("27.9")
        assert line.notes == ""
        assert line.customer_notes == "Leave at door"
        assert line.requested_delivery_date.isoformat() == "2024-09-01"

    def test_hydrates_purchase_items_from_unit_cost(self, purchase_engine):
        """Test purchase order items carry their price as unit_cost"""
        # Arrange
        items = [{"product_id": 1, "quantity_ordered": 4, "unit_cost": "2.50", "discount_percentage": None}]

        # Act
        lines = hydrate_lines(purchase_engine, items)

        # Assert
        assert lines[0].unit_price == Decimal("2.50")
        assert lines[0].discount_percentage == Decimal("0")
        assert lines[0].line_total == Decimal("10.00")

    def test_garbage_values_never_raise(self, sales_engine):
        """Test hydration degrades bad values to defaults"""
        # Arrange
        items = [{"product_id": "n/a", "quantity_ordered": "lots", "unit_price": {}, "discount_percentage": "abc"}]

        # Act
        lines = hydrate_lines(sales_engine, items)

        # Assert
        assert lines[0].product_id == 0
        assert lines[0].quantity == 0
        assert lines[0].final_line_total == Decimal("0")
        assert lines[0].is_submittable is False

    def test_missing_items_hydrate_to_empty(self, sales_engine):
        assert hydrate_lines(sales_engine, None) == ()
        assert hydrate_lines(sales_engine, []) == ()


class TestHydrateAdjustments:
    """Persisted order fields -> order adjustments"""

    def test_tax_rate_fraction_becomes_percentage(self, sales_engine):
        """
        Given: A persisted order with tax_rate 0.08 (fraction)
        When: It is hydrated
        Then: tax_rate is 8 (percentage)
        """
        # Arrange
        order = {"tax_rate": "0.0800", "shipping_cost": "20", "discount_amount": "5", "currency": "eur"}

        # Act
        adjustments = hydrate_adjustments(sales_engine, order)

        # Assert
        assert adjustments.tax_rate == Decimal("8")
        assert adjustments.shipping_cost == Decimal("20")
        assert adjustments.discount_amount == Decimal("5")
        assert adjustments.currency == "EUR"

    def test_missing_order_uses_defaults(self, sales_engine):
        adjustments = hydrate_adjustments(sales_engine, None)

        assert adjustments.tax_rate == Decimal("0")
        assert adjustments.currency == "USD"

    def test_purchase_order_discount_is_dropped(self, purchase_engine):
        """Test order-level discount is not hydrated for purchase orders"""
        adjustments = hydrate_adjustments(purchase_engine, {"discount_amount": "12"})

        assert adjustments.discount_amount == Decimal("0")


class TestToSubmission:
    """Engine state -> persistence payload"""

    def test_sales_submission(self, sales_engine):
        """Test sales payload uses unit_price, customer_notes and fractional tax"""
        # Arrange
        lines = sales_engine.add_line(())
        lines = sales_engine.update_line(lines, 0, "unit_price", "10")
        lines = sales_engine.update_line(lines, 0, "quantity", 3)
        lines = sales_engine.update_line(lines, 0, "discount_percentage", "10")
        adjustments = sales_engine.set_adjustment(sales_engine.new_adjustments(), "tax_rate", "8")
        adjustments = sales_engine.set_adjustment(adjustments, "discount_amount", "5")

        # Act
        payload = to_submission(sales_engine, lines, adjustments)

        # Assert
        item = payload["items"][0]
        assert set(item) == {
            "product_id", "quantity_ordered", "unit_price", "discount_percentage",
            "notes", "customer_notes", "line_total",
        }
        assert item["quantity_ordered"] == 3
        assert Decimal(item["unit_price"]) == Decimal("10")
        assert Decimal(item["line_total"]) == Decimal("30")
        assert Decimal(payload["tax_rate"]) == Decimal("0.08")
        assert Decimal(payload["discount_amount"]) == Decimal("5")
        assert payload["currency"] == "USD"

    def test_purchase_submission(self, purchase_engine):
        """Test purchase payload uses unit_cost and has no order discount"""
        # Arrange
        lines = purchase_engine.update_line(purchase_engine.add_line(()), 0, "unit_cost", "4")

        # Act
        payload = to_submission(purchase_engine, lines, purchase_engine.new_adjustments())

        # Assert
        item = payload["items"][0]
        assert "unit_cost" in item
        assert "unit_price" not in item
        assert "customer_notes" not in item
        assert "discount_amount" not in payload
        assert Decimal(payload["tax_rate"]) == Decimal("0")

    def test_tax_rate_round_trips_through_persistence(self, sales_engine):
        """Test fraction -> percentage -> fraction is lossless"""
        adjustments = hydrate_adjustments(sales_engine, {"tax_rate": "0.1250"})

        payload = to_submission(sales_engine, (), adjustments)

        assert Decimal(payload["tax_rate"]) == Decimal("0.125")
