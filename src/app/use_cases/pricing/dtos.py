"""Data Transfer Objects for Pricing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field
from src.domain.order_type import OrderType


class QuoteOrderCommandDTO(BaseModel):
    """
    Command DTO for quoting an order

    Used as input to QuoteOrder use case. Items and order fields arrive in
    their persisted shape (string numbers, tax_rate as a fraction).
    """

    order_type: OrderType = Field(
        ...,
        description="Order type (purchase_order or sales_order)"
    )

    items: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Persisted line items (quantity_ordered, unit_cost/unit_price, discount_percentage, ...)"
    )

    order: Dict[str, Any] = Field(
        default_factory=dict,
        description="Persisted order-level fields (tax_rate, shipping_cost, discount_amount, currency)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "order_type": "sales_order",
                "items": [
                    {
                        "product_id": 12,
                        "quantity_ordered": "3",
                        "unit_price": "10.00",
                        "discount_percentage": "10"
                    }
                ],
                "order": {
                    "tax_rate": "0.1000",
                    "shipping_cost": "20.00",
                    "discount_amount": "5.00",
                    "currency": "PHP"
                }
            }
        }


class LineEditDTO(BaseModel):
    """
    A single edit made on the order form

    - add: append an empty line
    - remove: remove the line at index
    - update: set field on the line at index
    - adjust: set an order-level adjustment field
    """

    action: Literal["add", "remove", "update", "adjust"] = Field(
        ...,
        description="Edit action"
    )

    index: Optional[int] = Field(
        default=None,
        description="Line index (remove, update)"
    )

    field: Optional[str] = Field(
        default=None,
        description="Field name (update, adjust)"
    )

    value: Any = Field(
        default=None,
        description="Raw form value (update, adjust)"
    )


class ApplyLineEditsCommandDTO(QuoteOrderCommandDTO):
    """
    Command DTO for replaying form edits

    Used as input to ApplyLineEdits use case. Edits are applied in order
    on top of the hydrated items and order fields.
    """

    edits: List[LineEditDTO] = Field(
        default_factory=list,
        description="Edits to apply, in order"
    )


class LineItemDTO(BaseModel):
    """Line item with its derived totals"""

    product_id: int
    product_sku: str
    product_name: str
    product_description: str
    quantity: int
    unit_price: Decimal
    discount_percentage: Decimal
    discount_amount: Decimal
    line_total: Decimal
    final_line_total: Decimal
    notes: str
    customer_notes: str
    requested_delivery_date: Optional[date] = None
    expected_delivery_date: Optional[date] = None
    is_submittable: bool


class OrderAdjustmentsDTO(BaseModel):
    """Order-level adjustments (tax_rate as a percentage)"""

    tax_rate: Decimal
    shipping_cost: Decimal
    discount_amount: Decimal
    currency: str


class OrderTotalsDTO(BaseModel):
    """Derived order totals"""

    subtotal: Decimal
    tax_amount: Decimal
    shipping_cost: Decimal
    discount_amount: Decimal
    total: Decimal
    currency: str
    line_count: int


class OrderQuoteResponseDTO(BaseModel):
    """
    Response DTO for pricing operations

    Returned by QuoteOrder and ApplyLineEdits use cases.
    """

    order_type: OrderType = Field(
        ...,
        description="Order type"
    )

    lines: List[LineItemDTO] = Field(
        ...,
        description="Line items with derived totals"
    )

    adjustments: OrderAdjustmentsDTO = Field(
        ...,
        description="Order-level adjustments"
    )

    totals: OrderTotalsDTO = Field(
        ...,
        description="Derived order totals"
    )

    submittable: bool = Field(
        ...,
        description="True when every line is submittable (sales orders also need at least one line)"
    )

    submission: Dict[str, Any] = Field(
        ...,
        description="Payload for the order persistence service (tax_rate as a fraction)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "order_type": "sales_order",
                "lines": [],
                "adjustments": {
                    "tax_rate": "10",
                    "shipping_cost": "20.00",
                    "discount_amount": "5.00",
                    "currency": "PHP"
                },
                "totals": {
                    "subtotal": "150.00",
                    "tax_amount": "15.00",
                    "shipping_cost": "20.00",
                    "discount_amount": "5.00",
                    "total": "180.00",
                    "currency": "PHP",
                    "line_count": 2
                },
                "submittable": False,
                "submission": {}
            }
        }
