"""Pricing engine errors

Coercion problems never surface as errors; these are raised only when a
caller breaks the engine's contract (bad index, bad field name).
"""

from typing import Optional


class PricingError(Exception):
    """Base class for pricing contract violations"""

    code = "PRICING_ERROR"

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason


class LineIndexError(PricingError, IndexError):
    """Line index outside the current list of line items"""

    code = "LINE_INDEX_OUT_OF_RANGE"


class UnknownFieldError(PricingError):
    """Field name is not editable on this order type"""

    code = "UNKNOWN_FIELD"


class DerivedFieldError(UnknownFieldError):
    """Attempt to write a derived total directly"""

    code = "DERIVED_FIELD_READ_ONLY"


class UnsupportedEditError(PricingError):
    """Edit action the engine does not know how to apply"""

    code = "UNSUPPORTED_EDIT"
