from .product_catalog import InMemoryProductCatalog

__all__ = [
    "InMemoryProductCatalog",
]
