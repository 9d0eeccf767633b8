"""
Apply Line Edits Use Case

Replays the edits made on an order form against the hydrated order and
returns the resulting derived state.
"""

import logging
from typing import Optional, Tuple
from src.app.pricing.engine import LineItemPricingEngine, pricing_for
from src.app.pricing.errors import PricingError, UnsupportedEditError
from src.app.pricing.hydration import hydrate_adjustments, hydrate_lines
from src.app.services.product_catalog import ProductCatalog
from src.domain.line_item import LineItem
from src.domain.order_adjustments import OrderAdjustments
from .dtos import ApplyLineEditsCommandDTO, LineEditDTO, OrderQuoteResponseDTO
from .quote_order import build_quote_response

logger = logging.getLogger(__name__)


class ApplyLineEdits:
    """
    Use case: Apply form edits to an order

    Business Rules:
    1. Edits are applied strictly in order, each on the result of the last
    2. Every edit goes through the pricing engine; totals are never set directly
    3. The first contract violation aborts the whole batch

    Flow:
    1. Hydrate items and order fields
    2. Apply each edit (add, remove, update, adjust)
    3. Return derived lines, totals and submission payload
    """

    def __init__(
        self,
        catalog: Optional[ProductCatalog] = None,
        default_currency: Optional[str] = None,
    ):
        self.catalog = catalog
        self.default_currency = default_currency

    async def execute(self, command: ApplyLineEditsCommandDTO) -> OrderQuoteResponseDTO:
        """
        Apply edits and derive the resulting order state.

        Args:
            command: Order in persisted shape plus the edits to replay

        Returns:
            OrderQuoteResponseDTO: State after the last edit

        Raises:
            PricingError: An edit broke the engine contract; the message names the edit
        """
        engine = pricing_for(command.order_type, self.catalog, self.default_currency)
        lines = hydrate_lines(engine, command.items)
        adjustments = hydrate_adjustments(engine, command.order)

        for position, edit in enumerate(command.edits):
            try:
                lines, adjustments = self._apply(engine, lines, adjustments, edit)
            except PricingError as e:
                logger.warning(f"Rejected edit {position} ({edit.action}): {e.message}")
                raise type(e)(f"Edit {position}: {e.message}", reason=e.reason) from e

        logger.info(
            f"Applied {len(command.edits)} edit(s) to {command.order_type.value}, "
            f"{len(lines)} line(s) remaining"
        )
        return build_quote_response(engine, lines, adjustments)

    @staticmethod
    def _apply(
        engine: LineItemPricingEngine,
        lines: Tuple[LineItem, ...],
        adjustments: OrderAdjustments,
        edit: LineEditDTO,
    ) -> Tuple[Tuple[LineItem, ...], OrderAdjustments]:
        if edit.action == "add":
            return engine.add_line(lines), adjustments
        if edit.action == "remove":
            return engine.remove_line(lines, edit.index), adjustments
        if edit.action == "update":
            return engine.update_line(lines, edit.index, edit.field, edit.value), adjustments
        if edit.action == "adjust":
            return lines, engine.set_adjustment(adjustments, edit.field, edit.value)
        raise UnsupportedEditError(f"Unsupported edit action '{edit.action}'")
