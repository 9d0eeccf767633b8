"""Pricing API Routes

FastAPI routes for line item and order total derivation.
"""

from fastapi import APIRouter, status

from config import ApplicationConfig
from src.adapter.services.product_catalog import InMemoryProductCatalog
from src.api.error import ClientError
from src.api.schemas.pricing_request import EditsRequestSchema, QuoteRequestSchema
from src.app.pricing.errors import PricingError
from src.app.use_cases.pricing.apply_line_edits import ApplyLineEdits
from src.app.use_cases.pricing.dtos import (
    ApplyLineEditsCommandDTO,
    LineEditDTO,
    OrderQuoteResponseDTO,
    QuoteOrderCommandDTO,
)
from src.app.use_cases.pricing.quote_order import QuoteOrder
from src.domain.order_type import OrderType

router = APIRouter(prefix="/pricing", tags=["Pricing"])

ERROR_RESPONSES = {
    400: {
        "description": "Invalid edit or request parameters",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "LINE_INDEX_OUT_OF_RANGE",
                        "message": "Edit 1: Line index 3 out of range",
                        "reason": "Order has 1 line item(s)"
                    }
                }
            }
        }
    }
}


def _catalog(request: QuoteRequestSchema) -> InMemoryProductCatalog:
    return InMemoryProductCatalog(product.model_dump() for product in request.catalog)


@router.post(
    "/{order_type}/quote",
    response_model=OrderQuoteResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def quote_order(order_type: OrderType, request: QuoteRequestSchema):
    """
    Derive line and order totals for an order in its persisted shape.

    Numeric fields may be numbers or strings; unparsable values count as 0.
    `order.tax_rate` is a fraction (0.08) and is returned as a percentage (8).

    **Returns:**
    - 200: Derived lines, adjustments, totals and submission payload
    - 400: Invalid request parameters
    """
    command = QuoteOrderCommandDTO(
        order_type=order_type,
        items=request.items,
        order=request.order,
    )

    use_case = QuoteOrder(catalog=_catalog(request), default_currency=ApplicationConfig.DEFAULT_CURRENCY)
    return await use_case.execute(command)


@router.post(
    "/{order_type}/edits",
    response_model=OrderQuoteResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
async def apply_edits(order_type: OrderType, request: EditsRequestSchema):
    """
    Replay order form edits and return the resulting derived state.

    **Edit actions:**
    - `add`: append an empty line
    - `remove` (`index`): remove a line
    - `update` (`index`, `field`, `value`): set a line field
    - `adjust` (`field`, `value`): set tax_rate (percentage), shipping_cost,
      discount_amount (sales orders only) or currency

    **Returns:**
    - 200: State after the last edit
    - 400: An edit referenced a missing line or an unknown/derived field
    """
    command = ApplyLineEditsCommandDTO(
        order_type=order_type,
        items=request.items,
        order=request.order,
        edits=[LineEditDTO(**edit.model_dump()) for edit in request.edits],
    )

    use_case = ApplyLineEdits(catalog=_catalog(request), default_currency=ApplicationConfig.DEFAULT_CURRENCY)
    try:
        return await use_case.execute(command)
    except PricingError as e:
        raise ClientError(e)
