"""Hydration and submission projection

Converts persisted (server-shaped) orders into engine state and engine state
into the reduced payload the order persistence service accepts.

Tax rate convention: percentage inside the engine, fraction at the
persistence boundary. The conversion happens here and nowhere else.
Line discount percentages are percentages on both sides.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple
from src.domain.line_item import LineItem
from src.domain.order_adjustments import OrderAdjustments
from src.domain.order_type import OrderType
from .coercion import HUNDRED, to_date, to_decimal, to_int, to_money, to_percentage, to_quantity, to_text
from .engine import LineItemPricingEngine


def _first_present(item: Mapping[str, Any], *keys: str) -> Optional[Any]:
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return None


def hydrate_line(engine: LineItemPricingEngine, item: Mapping[str, Any]) -> LineItem:
    """
    Build an engine line item from a persisted order item.

    Server-computed totals are ignored; the engine re-derives them from
    quantity, price and discount.
    """
    line = LineItem(
        product_id=to_int(item.get("product_id")),
        product_sku=to_text(item.get("product_sku")),
        product_name=to_text(item.get("product_name")),
        product_description=to_text(item.get("product_description")),
        quantity=to_quantity(_first_present(item, "quantity_ordered", "quantity")),
        unit_price=to_money(_first_present(item, engine.price_field, "unit_price")),
        discount_percentage=to_percentage(item.get("discount_percentage")),
        notes=to_text(item.get("notes")),
        customer_notes=to_text(item.get("customer_notes")),
        requested_delivery_date=to_date(item.get("requested_delivery_date")),
        expected_delivery_date=to_date(item.get("expected_delivery_date")),
    )
    return engine.derive_line(line)


def hydrate_lines(
    engine: LineItemPricingEngine,
    items: Optional[Iterable[Mapping[str, Any]]],
) -> Tuple[LineItem, ...]:
    return tuple(hydrate_line(engine, item) for item in items or ())


def hydrate_adjustments(
    engine: LineItemPricingEngine,
    order: Optional[Mapping[str, Any]],
) -> OrderAdjustments:
    """
    Build order adjustments from a persisted order.

    Args:
        engine: Pricing engine variant for the order type
        order: Persisted order fields (tax_rate as a fraction, e.g. 0.08)

    Returns:
        OrderAdjustments with tax_rate as a percentage (e.g. 8)
    """
    order = order or {}
    adjustments = engine.new_adjustments()
    adjustments = engine.set_adjustment(adjustments, "tax_rate", to_decimal(order.get("tax_rate")) * HUNDRED)
    adjustments = engine.set_adjustment(adjustments, "shipping_cost", order.get("shipping_cost"))
    if engine.supports_order_discount:
        adjustments = engine.set_adjustment(adjustments, "discount_amount", order.get("discount_amount"))
    if order.get("currency"):
        adjustments = engine.set_adjustment(adjustments, "currency", order.get("currency"))
    return adjustments


def to_submission(
    engine: LineItemPricingEngine,
    lines: Sequence[LineItem],
    adjustments: OrderAdjustments,
) -> Dict[str, Any]:
    """
    Project engine state onto the payload sent to the persistence service.

    Decimal values are rendered as strings so the payload is JSON-safe
    without losing precision.
    """
    items = []
    for line in lines:
        item = {
            "product_id": line.product_id,
            "quantity_ordered": line.quantity,
            engine.price_field: str(line.unit_price),
            "discount_percentage": str(line.discount_percentage),
            "notes": line.notes,
            "line_total": str(line.line_total),
        }
        if engine.order_type is OrderType.SALES_ORDER:
            item["customer_notes"] = line.customer_notes
        items.append(item)

    payload: Dict[str, Any] = {
        "items": items,
        "currency": adjustments.currency,
        "tax_rate": str(adjustments.tax_rate / HUNDRED),
        "shipping_cost": str(adjustments.shipping_cost),
    }
    if engine.supports_order_discount:
        payload["discount_amount"] = str(adjustments.discount_amount)
    return payload
