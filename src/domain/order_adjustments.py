"""Order Adjustments and Order Totals

Order-level pricing inputs and the totals derived from them.
"""

from decimal import Decimal
from sqlmodel import Field
from src.domain.base import BaseModel


class OrderAdjustments(BaseModel):
    """
    Order Adjustments - Order-level (not per-line) pricing inputs

    Domain Rules:
    - tax_rate is a percentage (0..100), never stored as a fraction
    - shipping_cost and discount_amount are absolute currency amounts
    - discount_amount only applies to sales orders
    """

    tax_rate: Decimal = Field(
        default=Decimal("0"),
        description="Tax rate as a percentage (0..100)"
    )

    shipping_cost: Decimal = Field(
        default=Decimal("0"),
        description="Shipping cost in order currency"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0"),
        description="Order-level discount in order currency (sales orders only)"
    )

    currency: str = Field(
        default="PHP",
        min_length=3,
        max_length=3,
        description="Currency code (ISO 4217)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "tax_rate": "10",
                "shipping_cost": "20.00",
                "discount_amount": "5.00",
                "currency": "PHP"
            }
        }


class OrderTotals(BaseModel):
    """
    Order Totals - Always derived from line items and adjustments

    Domain Rules:
    - tax_amount = subtotal * tax_rate / 100
    - total = subtotal + tax_amount + shipping_cost - discount_amount
    - Never stored; recomputed on every read
    """

    subtotal: Decimal = Field(description="Sum of line totals")
    tax_amount: Decimal = Field(description="Tax on the subtotal")
    shipping_cost: Decimal = Field(description="Shipping cost applied")
    discount_amount: Decimal = Field(description="Order-level discount applied")
    total: Decimal = Field(description="Grand total")
    currency: str = Field(description="Currency code (ISO 4217)")
    line_count: int = Field(default=0, description="Number of line items")
