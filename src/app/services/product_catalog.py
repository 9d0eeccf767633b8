"""Product Catalog Service Interface

Defines the contract for looking up products during line item editing.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.catalog_product import CatalogProduct


class ProductCatalog(ABC):
    """
    Service interface for product lookups

    Implementations serve a fixed snapshot; the pricing engine never
    fetches catalog data itself.
    """

    @abstractmethod
    def find(self, product_id: int) -> Optional[CatalogProduct]:
        """
        Find a product by ID

        Args:
            product_id: Catalog product ID

        Returns:
            CatalogProduct if present in the snapshot, None otherwise
        """
        pass
