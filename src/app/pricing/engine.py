"""Line Item Pricing Engine

Derives line and order totals for purchase orders and sales orders.

The engine holds no order state. Callers own the tuple of line items and the
order adjustments and thread them through every call; each operation returns
new values and leaves its inputs untouched, so reference-equality change
detection always sees an update.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Sequence, Tuple
from config import ApplicationConfig
from src.app.services.product_catalog import ProductCatalog
from src.domain.line_item import LineItem, PRICED_FIELDS, DERIVED_FIELDS, DATE_FIELDS
from src.domain.order_adjustments import OrderAdjustments, OrderTotals
from src.domain.order_type import OrderType
from .coercion import (
    HUNDRED,
    ZERO,
    to_currency,
    to_date,
    to_int,
    to_money,
    to_percentage,
    to_quantity,
    to_text,
)
from .errors import DerivedFieldError, LineIndexError, UnknownFieldError

logger = logging.getLogger(__name__)

LineItems = Tuple[LineItem, ...]

PRICED_COERCERS: Dict[str, Callable[[Any], Any]] = {
    "quantity": to_quantity,
    "unit_price": to_money,
    "discount_percentage": to_percentage,
}

ADJUSTMENT_COERCERS: Dict[str, Callable[[Any], Decimal]] = {
    "tax_rate": to_percentage,
    "shipping_cost": to_money,
    "discount_amount": to_money,
}


class LineItemPricingEngine(ABC):
    """
    Pricing engine shared by purchase and sales orders

    Business Rules:
    1. Editing quantity, unit price or discount recomputes that line
    2. Selecting a catalog product copies SKU, name and price, then recomputes
    3. Selecting a product missing from the catalog only changes product_id
    4. Derived totals can never be written directly
    5. Recomputation always starts from base fields, so repeating an edit
       yields identical totals

    Subclasses decide where the line discount lands (``_line_total``) and
    which order-level adjustments exist.
    """

    order_type: OrderType
    # Name of the unit price field at the persistence boundary
    price_field = "unit_price"
    field_aliases: Dict[str, str] = {"quantity_ordered": "quantity"}
    adjustment_fields: Tuple[str, ...] = ("tax_rate", "shipping_cost", "discount_amount", "currency")

    def __init__(
        self,
        catalog: Optional[ProductCatalog] = None,
        default_currency: Optional[str] = None,
    ):
        """
        Initialize the engine for one edit session.

        Args:
            catalog: Fixed product snapshot used for product selection
            default_currency: Currency for new orders (defaults to ApplicationConfig.DEFAULT_CURRENCY)
        """
        self.catalog = catalog
        self.default_currency = to_currency(default_currency, ApplicationConfig.DEFAULT_CURRENCY)

    @property
    def supports_order_discount(self) -> bool:
        return "discount_amount" in self.adjustment_fields

    # Line items

    def add_line(self, lines: Sequence[LineItem]) -> LineItems:
        """Append an empty line (quantity 1, no product, zero price)"""
        return (*lines, self.derive_line(LineItem()))

    def remove_line(self, lines: Sequence[LineItem], index: int) -> LineItems:
        self._check_index(lines, index)
        return tuple(line for position, line in enumerate(lines) if position != index)

    def update_line(
        self,
        lines: Sequence[LineItem],
        index: int,
        field_name: str,
        new_value: Any,
    ) -> LineItems:
        """
        Set one field on one line and return the updated list.

        Args:
            lines: Current line items
            index: Position of the line to edit
            field_name: Field to set (variant aliases such as 'unit_cost' accepted)
            new_value: Raw value from the form; numeric fields are coerced

        Returns:
            New tuple of line items with the edited line re-derived

        Raises:
            LineIndexError: index is outside the list
            DerivedFieldError: field_name is a derived total
            UnknownFieldError: field_name is not a line item field
        """
        self._check_index(lines, index)
        field_name = self.resolve_field(field_name)
        line = lines[index]

        if field_name in PRICED_FIELDS:
            coerced = PRICED_COERCERS[field_name](new_value)
            updated = self.derive_line(line.model_copy(update={field_name: coerced}))
        elif field_name == "product_id":
            updated = self._select_product(line, new_value)
        elif field_name in DERIVED_FIELDS:
            raise DerivedFieldError(
                f"'{field_name}' is derived and cannot be set directly",
                reason="Edit quantity, unit price or discount instead",
            )
        elif field_name in DATE_FIELDS:
            updated = line.model_copy(update={field_name: to_date(new_value)})
        elif field_name in LineItem.model_fields:
            # Remaining fields are free text; strings are kept as typed
            updated = line.model_copy(update={field_name: to_text(new_value)})
        else:
            raise UnknownFieldError(
                f"Unknown line item field '{field_name}'",
                reason=f"Not a field of {self.order_type.value} line items",
            )

        return (*lines[:index], updated, *lines[index + 1:])

    def derive_line(self, line: LineItem) -> LineItem:
        """Recompute the derived totals of a line from its base fields"""
        gross = line.quantity * line.unit_price
        discount = gross * line.discount_percentage / HUNDRED
        net = gross - discount
        return line.model_copy(
            update={
                "discount_amount": discount,
                "line_total": self._line_total(gross, net),
                "final_line_total": net,
            }
        )

    def resolve_field(self, field_name: str) -> str:
        """Map a variant-specific form field name onto the line item field"""
        return self.field_aliases.get(field_name, field_name)

    @abstractmethod
    def _line_total(self, gross: Decimal, net: Decimal) -> Decimal:
        """Line total stored on the line, given its gross and net amounts"""
        pass

    @abstractmethod
    def _subtotal_of(self, line: LineItem) -> Decimal:
        """Amount a line contributes to the order subtotal"""
        pass

    def _select_product(self, line: LineItem, new_value: Any) -> LineItem:
        product_id = to_int(new_value)
        product = self.catalog.find(product_id) if self.catalog is not None else None

        if product is None:
            logger.debug(f"Product {product_id} not in catalog snapshot, keeping line pricing")
            return line.model_copy(update={"product_id": product_id})

        return self.derive_line(
            line.model_copy(
                update={
                    "product_id": product_id,
                    "product_sku": product.sku,
                    "product_name": product.name,
                    "unit_price": to_money(product.price),
                }
            )
        )

    @staticmethod
    def _check_index(lines: Sequence[LineItem], index: Any) -> None:
        valid = isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(lines)
        if not valid:
            raise LineIndexError(
                f"Line index {index!r} out of range",
                reason=f"Order has {len(lines)} line item(s)",
            )

    # Order level

    def new_adjustments(self) -> OrderAdjustments:
        return OrderAdjustments(currency=self.default_currency)

    def set_adjustment(
        self,
        adjustments: OrderAdjustments,
        field_name: str,
        new_value: Any,
    ) -> OrderAdjustments:
        """
        Set one order-level adjustment.

        Numeric fields are coerced (non-numeric characters stripped, 0 on
        failure); currency falls back to the engine's default currency.

        Raises:
            UnknownFieldError: field_name is not an adjustment of this order type
        """
        if field_name not in self.adjustment_fields:
            raise UnknownFieldError(
                f"Unknown order adjustment '{field_name}'",
                reason=f"{self.order_type.value} supports: {', '.join(self.adjustment_fields)}",
            )

        if field_name == "currency":
            value = to_currency(new_value, self.default_currency)
        else:
            value = ADJUSTMENT_COERCERS[field_name](new_value)

        return adjustments.model_copy(update={field_name: value})

    def compute_order_totals(
        self,
        lines: Sequence[LineItem],
        adjustments: OrderAdjustments,
    ) -> OrderTotals:
        """
        Derive order totals from the current lines and adjustments.

        Returns:
            OrderTotals where total = subtotal + tax + shipping - order discount
        """
        subtotal = sum((self._subtotal_of(line) for line in lines), ZERO)
        tax_amount = subtotal * adjustments.tax_rate / HUNDRED
        discount_amount = adjustments.discount_amount if self.supports_order_discount else ZERO

        return OrderTotals(
            subtotal=subtotal,
            tax_amount=tax_amount,
            shipping_cost=adjustments.shipping_cost,
            discount_amount=discount_amount,
            total=subtotal + tax_amount + adjustments.shipping_cost - discount_amount,
            currency=adjustments.currency,
            line_count=len(lines),
        )


class PurchaseOrderPricing(LineItemPricingEngine):
    """
    Purchase order pricing

    The line discount is baked into line_total and there is no order-level
    discount; the subtotal aggregates line_total.
    """

    order_type = OrderType.PURCHASE_ORDER
    price_field = "unit_cost"
    field_aliases = {"quantity_ordered": "quantity", "unit_cost": "unit_price"}
    adjustment_fields = ("tax_rate", "shipping_cost", "currency")

    def _line_total(self, gross: Decimal, net: Decimal) -> Decimal:
        return net

    def _subtotal_of(self, line: LineItem) -> Decimal:
        return line.line_total


class SalesOrderPricing(LineItemPricingEngine):
    """
    Sales order pricing

    line_total stays pre-discount, final_line_total carries the discount,
    and an order-level discount is subtracted after tax and shipping.
    """

    order_type = OrderType.SALES_ORDER

    def _line_total(self, gross: Decimal, net: Decimal) -> Decimal:
        return gross

    def _subtotal_of(self, line: LineItem) -> Decimal:
        return line.final_line_total


ENGINES = {
    OrderType.PURCHASE_ORDER: PurchaseOrderPricing,
    OrderType.SALES_ORDER: SalesOrderPricing,
}


def pricing_for(
    order_type: OrderType,
    catalog: Optional[ProductCatalog] = None,
    default_currency: Optional[str] = None,
) -> LineItemPricingEngine:
    """Build the pricing engine variant for an order type"""
    return ENGINES[OrderType(order_type)](catalog=catalog, default_currency=default_currency)
