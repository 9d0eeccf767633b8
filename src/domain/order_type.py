"""Order Type

Purchase orders and sales orders price their lines differently.
"""

from enum import Enum


class OrderType(str, Enum):
    """Order types supported by the pricing engine"""
    PURCHASE_ORDER = "purchase_order"
    SALES_ORDER = "sales_order"
