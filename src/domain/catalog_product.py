"""Catalog Product Domain Entity

Read-only product record supplied by the catalog snapshot.
"""

from decimal import Decimal
from sqlmodel import Field
from src.domain.base import BaseModel


class CatalogProduct(BaseModel):
    """
    Catalog Product - Purchasable product as seen at page load

    Domain Rules:
    - The snapshot is fixed for the lifetime of an edit session
    - Later price changes never touch lines that already copied the price
    """

    id: int = Field(description="Product ID")
    sku: str = Field(default="", description="Stock keeping unit")
    name: str = Field(default="", description="Product name")
    description: str = Field(default="", description="Product description")
    price: Decimal = Field(default=Decimal("0"), description="Current catalog price")
