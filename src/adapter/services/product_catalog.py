"""Product Catalog Implementations

In-memory catalog snapshot built from the products a page was loaded with.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Union
from src.app.pricing.coercion import to_int, to_money, to_text
from src.app.services.product_catalog import ProductCatalog
from src.domain.catalog_product import CatalogProduct

logger = logging.getLogger(__name__)


class InMemoryProductCatalog(ProductCatalog):
    """
    Catalog backed by a fixed snapshot of products

    Raw records are coerced defensively: the backend may serialize
    prices (and sometimes IDs) as strings. Records without a usable id are
    skipped, since product 0 means "no product chosen" on a line.
    """

    def __init__(self, products: Iterable[Union[CatalogProduct, Mapping[str, Any]]] = ()):
        self._products: Dict[int, CatalogProduct] = {}
        for product in products:
            if not isinstance(product, CatalogProduct):
                product = self._from_record(product)
            if product.id == 0:
                logger.debug(f"Skipping catalog product without a usable id: {product.sku or product.name!r}")
                continue
            if product.id in self._products:
                logger.debug(f"Duplicate catalog product {product.id}, keeping the first entry")
                continue
            self._products[product.id] = product

    @staticmethod
    def _from_record(record: Mapping[str, Any]) -> CatalogProduct:
        return CatalogProduct(
            id=to_int(record.get("id")),
            sku=to_text(record.get("sku")),
            name=to_text(record.get("name")),
            description=to_text(record.get("description")),
            price=to_money(record.get("price")),
        )

    def find(self, product_id: int) -> Optional[CatalogProduct]:
        return self._products.get(product_id)

    def __len__(self) -> int:
        return len(self._products)
