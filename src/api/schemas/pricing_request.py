"""Request schemas for Pricing API

Pydantic models for validating incoming HTTP requests.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class CatalogProductSchema(BaseModel):
    """
    Catalog product as loaded by the order page

    price is left untyped: catalogs may send it as a number or a string,
    and it is coerced by the catalog adapter.
    """

    id: int = Field(
        ...,
        description="Product ID"
    )

    sku: Optional[str] = Field(
        default=None,
        description="Stock keeping unit"
    )

    name: Optional[str] = Field(
        default=None,
        description="Product name"
    )

    description: Optional[str] = Field(
        default=None,
        description="Product description"
    )

    price: Any = Field(
        default=None,
        description="Current catalog price"
    )


class QuoteRequestSchema(BaseModel):
    """
    Request schema for quoting an order

    Used for POST /pricing/{order_type}/quote endpoint.
    """

    items: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Persisted line items"
    )

    order: Dict[str, Any] = Field(
        default_factory=dict,
        description="Persisted order-level fields (tax_rate as a fraction)"
    )

    catalog: List[CatalogProductSchema] = Field(
        default_factory=list,
        description="Catalog snapshot used for product selection"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "items": [
                    {"product_id": 12, "quantity_ordered": 3, "unit_cost": "10.00", "discount_percentage": "10"}
                ],
                "order": {"tax_rate": "0.08", "shipping_cost": "20.00", "currency": "PHP"},
                "catalog": [{"id": 12, "sku": "SKU-0012", "name": "Steel bolt M8", "price": "10.00"}]
            }
        }


class LineEditSchema(BaseModel):
    """One form edit"""

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
        min_length=1,
        description="Field name (update, adjust)"
    )

    value: Any = Field(
        default=None,
        description="Raw form value"
    )


class EditsRequestSchema(QuoteRequestSchema):
    """
    Request schema for replaying form edits

    Used for POST /pricing/{order_type}/edits endpoint.
    """

    edits: List[LineEditSchema] = Field(
        default_factory=list,
        description="Edits to apply, in order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "items": [],
                "order": {},
                "catalog": [{"id": 12, "sku": "SKU-0012", "name": "Steel bolt M8", "price": "10.00"}],
                "edits": [
                    {"action": "add"},
                    {"action": "update", "index": 0, "field": "product_id", "value": 12},
                    {"action": "update", "index": 0, "field": "quantity", "value": "3"},
                    {"action": "adjust", "field": "tax_rate", "value": "8"}
                ]
            }
        }
