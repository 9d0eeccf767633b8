"""Line item pricing engine"""
from .engine import (
    LineItemPricingEngine,
    PurchaseOrderPricing,
    SalesOrderPricing,
    pricing_for,
)
from .errors import (
    PricingError,
    LineIndexError,
    UnknownFieldError,
    DerivedFieldError,
    UnsupportedEditError,
)
from .hydration import hydrate_line, hydrate_lines, hydrate_adjustments, to_submission

__all__ = [
    "LineItemPricingEngine",
    "PurchaseOrderPricing",
    "SalesOrderPricing",
    "pricing_for",
    "PricingError",
    "LineIndexError",
    "UnknownFieldError",
    "DerivedFieldError",
    "UnsupportedEditError",
    "hydrate_line",
    "hydrate_lines",
    "hydrate_adjustments",
    "to_submission",
]
