from .base import BaseModel
from .order_type import OrderType
from .line_item import LineItem, PRICED_FIELDS, DERIVED_FIELDS, DATE_FIELDS
from .order_adjustments import OrderAdjustments, OrderTotals
from .catalog_product import CatalogProduct

__all__ = [
    "BaseModel",
    "OrderType",
    "LineItem",
    "PRICED_FIELDS",
    "DERIVED_FIELDS",
    "DATE_FIELDS",
    "OrderAdjustments",
    "OrderTotals",
    "CatalogProduct",
]
