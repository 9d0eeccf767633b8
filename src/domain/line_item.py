"""Line Item Domain Entity

One product line within a purchase order or sales order.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel


# Fields whose change triggers recomputation of the derived totals
PRICED_FIELDS = frozenset({"quantity", "unit_price", "discount_percentage"})

# Fields only the pricing engine may write
DERIVED_FIELDS = frozenset({"discount_amount", "line_total", "final_line_total"})

DATE_FIELDS = frozenset({"requested_delivery_date", "expected_delivery_date"})


class LineItem(BaseModel):
    """
    Line Item - Product entry within an order

    Domain Rules:
    - product_id = 0 means no product has been chosen yet
    - product_sku/product_name are copied from the catalog at selection time
    - discount_amount = quantity * unit_price * discount_percentage / 100
    - final_line_total = quantity * unit_price - discount_amount
    - line_total is pre-discount for sales orders, post-discount for purchase orders
    - Derived fields are only ever written by the pricing engine
    """

    product_id: int = Field(
        default=0,
        description="Catalog product ID (0 = no product selected)"
    )

    product_sku: str = Field(
        default="",
        description="SKU copied from the catalog at selection time"
    )

    product_name: str = Field(
        default="",
        description="Product name copied from the catalog at selection time"
    )

    product_description: str = Field(
        default="",
        description="Free text product description"
    )

    quantity: int = Field(
        default=1,
        description="Ordered quantity (>= 1 to be submittable)"
    )

    unit_price: Decimal = Field(
        default=Decimal("0"),
        description="Price per unit in order currency (unit cost for purchase orders)"
    )

    discount_percentage: Decimal = Field(
        default=Decimal("0"),
        description="Line discount as a percentage (0..100)"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0"),
        description="Derived: discount in currency"
    )

    line_total: Decimal = Field(
        default=Decimal("0"),
        description="Derived: line total (see order type for discount placement)"
    )

    final_line_total: Decimal = Field(
        default=Decimal("0"),
        description="Derived: quantity * unit_price - discount_amount"
    )

    notes: str = Field(
        default="",
        description="Internal notes"
    )

    customer_notes: str = Field(
        default="",
        description="Notes visible to the customer (sales orders)"
    )

    requested_delivery_date: Optional[date] = Field(
        default=None,
        description="Requested delivery date (sales orders)"
    )

    expected_delivery_date: Optional[date] = Field(
        default=None,
        description="Expected delivery date (purchase orders)"
    )

    @property
    def is_submittable(self) -> bool:
        """A line can be submitted once a product is chosen and quantity >= 1"""
        return self.product_id != 0 and self.quantity >= 1

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "product_id": 12,
                "product_sku": "SKU-0012",
                "product_name": "Steel bolt M8",
                "product_description": "",
                "quantity": 3,
                "unit_price": "10.00",
                "discount_percentage": "10",
                "discount_amount": "3.00",
                "line_total": "30.00",
                "final_line_total": "27.00",
                "notes": "",
                "customer_notes": "",
                "requested_delivery_date": None,
                "expected_delivery_date": None
            }
        }
