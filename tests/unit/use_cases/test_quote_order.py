"""Unit tests for QuoteOrder use case

Tests cover:
- Hydration of persisted orders with derived totals
- Purchase vs sales order totals
- Submittable flag
"""

import pytest
from decimal import Decimal

from src.adapter.services.product_catalog import InMemoryProductCatalog
from src.app.use_cases.pricing.dtos import QuoteOrderCommandDTO
from src.app.use_cases.pricing.quote_order import QuoteOrder
from src.domain.order_type import OrderType


@pytest.fixture
def use_case():
    """QuoteOrder use case with an empty catalog"""
    return QuoteOrder(catalog=InMemoryProductCatalog(), default_currency="USD")


@pytest.mark.asyncio
class TestQuoteOrderSuccess:
    """Test successful quotes"""

    async def test_quote_sales_order(self, use_case):
        """
        Given: A persisted sales order with two items and fractional tax rate
        When: The order is quoted
        Then: Lines are re-derived and totals include tax, shipping and discount
        """
        # Arrange
        command = QuoteOrderCommandDTO(
            order_type=OrderType.SALES_ORDER,
            items=[
                {"product_id": 1, "quantity_ordered": "1", "unit_price": "100.00"},
                {"product_id": 2, "quantity_ordered": "2", "unit_price": "25", "discount_percentage": "0"},
            ],
            order={"tax_rate": "0.10", "shipping_cost": "20", "discount_amount": "5"},
        )

        # Act
        response = await use_case.execute(command)

        # Assert
        assert response.order_type == OrderType.SALES_ORDER
        assert [line.final_line_total for line in response.lines] == [Decimal("100"), Decimal("50")]
        assert response.adjustments.tax_rate == Decimal("10")
        assert response.totals.subtotal == Decimal("150")
        assert response.totals.tax_amount == Decimal("15")
        assert response.totals.total == Decimal("180")
        assert response.totals.currency == "USD"
        assert response.submittable is True
        assert Decimal(response.submission["tax_rate"]) == Decimal("0.1")

    async def test_quote_purchase_order(self, use_case):
        """Test purchase order quote aggregates post-discount line totals"""
        # Arrange
        command = QuoteOrderCommandDTO(
            order_type=OrderType.PURCHASE_ORDER,
            items=[{"product_id": 9, "quantity_ordered": 10, "unit_cost": "4", "discount_percentage": "25"}],
            order={"tax_rate": "0", "shipping_cost": "0", "discount_amount": "100"},
        )

        # Act
        response = await use_case.execute(command)

        # Assert
        assert response.lines[0].line_total == Decimal("30")
        assert response.totals.discount_amount == Decimal("0")
        assert response.totals.total == Decimal("30")
        assert "discount_amount" not in response.submission


@pytest.mark.asyncio
class TestQuoteOrderSubmittable:
    """Test the submittable flag"""

    async def test_empty_sales_order_is_not_submittable(self, use_case):
        command = QuoteOrderCommandDTO(order_type=OrderType.SALES_ORDER)

        response = await use_case.execute(command)

        assert response.lines == []
        assert response.totals.total == Decimal("0")
        assert response.submittable is False

    async def test_empty_purchase_order_is_submittable(self, use_case):
        command = QuoteOrderCommandDTO(order_type=OrderType.PURCHASE_ORDER)

        response = await use_case.execute(command)

        assert response.submittable is True

    async def test_line_without_product_blocks_submission(self, use_case):
        """Test one unsubmittable line makes the order unsubmittable"""
        # Arrange
        command = QuoteOrderCommandDTO(
            order_type=OrderType.SALES_ORDER,
            items=[
                {"product_id": 1, "quantity_ordered": 1, "unit_price": "5"},
                {"product_id": 0, "quantity_ordered": 1, "unit_price": "5"},
            ],
        )

        # Act
        response = await use_case.execute(command)

        # Assert
        assert [line.is_submittable for line in response.lines] == [True, False]
        assert response.submittable is False
