"""Pricing use cases"""
from .quote_order import QuoteOrder, build_quote_response
from .apply_line_edits import ApplyLineEdits
from .dtos import (
    QuoteOrderCommandDTO,
    ApplyLineEditsCommandDTO,
    LineEditDTO,
    LineItemDTO,
    OrderAdjustmentsDTO,
    OrderTotalsDTO,
    OrderQuoteResponseDTO,
)

__all__ = [
    "QuoteOrder",
    "ApplyLineEdits",
    "build_quote_response",
    "QuoteOrderCommandDTO",
    "ApplyLineEditsCommandDTO",
    "LineEditDTO",
    "LineItemDTO",
    "OrderAdjustmentsDTO",
    "OrderTotalsDTO",
    "OrderQuoteResponseDTO",
]
