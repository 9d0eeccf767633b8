"""
Quote Order Use Case

Hydrates a persisted order and derives its line and order totals without
persisting anything.
"""

import logging
from typing import Optional, Sequence
from src.app.pricing.engine import LineItemPricingEngine, pricing_for
from src.app.pricing.hydration import hydrate_adjustments, hydrate_lines, to_submission
from src.app.services.product_catalog import ProductCatalog
from src.domain.line_item import LineItem
from src.domain.order_adjustments import OrderAdjustments
from src.domain.order_type import OrderType
from .dtos import (
    LineItemDTO,
    OrderAdjustmentsDTO,
    OrderQuoteResponseDTO,
    OrderTotalsDTO,
    QuoteOrderCommandDTO,
)

logger = logging.getLogger(__name__)


def build_quote_response(
    engine: LineItemPricingEngine,
    lines: Sequence[LineItem],
    adjustments: OrderAdjustments,
) -> OrderQuoteResponseDTO:
    """Render engine state as a response DTO"""
    totals = engine.compute_order_totals(lines, adjustments)

    line_dtos = [
        LineItemDTO(**line.model_dump(), is_submittable=line.is_submittable)
        for line in lines
    ]

    # Purchase orders may be saved without items, sales orders may not
    has_required_lines = bool(lines) or engine.order_type is OrderType.PURCHASE_ORDER

    return OrderQuoteResponseDTO(
        order_type=engine.order_type,
        lines=line_dtos,
        adjustments=OrderAdjustmentsDTO(**adjustments.model_dump()),
        totals=OrderTotalsDTO(**totals.model_dump()),
        submittable=has_required_lines and all(line.is_submittable for line in lines),
        submission=to_submission(engine, lines, adjustments),
    )


class QuoteOrder:
    """
    Use case: Quote an order

    Business Rules:
    1. Persisted numeric fields are coerced defensively (never fail)
    2. Server-computed line totals are discarded and re-derived
    3. tax_rate arrives as a fraction and is quoted as a percentage
    4. Read-only: nothing is persisted
    """

    def __init__(
        self,
        catalog: Optional[ProductCatalog] = None,
        default_currency: Optional[str] = None,
    ):
        self.catalog = catalog
        self.default_currency = default_currency

    async def execute(self, command: QuoteOrderCommandDTO) -> OrderQuoteResponseDTO:
        """
        Derive totals for a persisted order.

        Args:
            command: Quote command with order type, items and order fields

        Returns:
            OrderQuoteResponseDTO: Lines, adjustments, totals and submission payload
        """
        engine = pricing_for(command.order_type, self.catalog, self.default_currency)

        lines = hydrate_lines(engine, command.items)
        adjustments = hydrate_adjustments(engine, command.order)

        logger.info(f"Quoting {command.order_type.value} with {len(lines)} line(s)")
        return build_quote_response(engine, lines, adjustments)
