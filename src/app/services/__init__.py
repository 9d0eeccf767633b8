from .product_catalog import ProductCatalog

__all__ = [
    "ProductCatalog",
]
