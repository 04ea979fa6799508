"""
Catalog Store - immutable, process-lifetime product list.

The store is the ground truth every recommendation is filtered against.
It is constructed explicitly and injected into the components that need
it; get_catalog_store() only provides the default demo instance.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from shopai.schemas.products import Product
from shopai.utils.constants import SAMPLE_PRODUCTS

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Read-only snapshot of the catalog.

    Products keep their insertion order. Ids must be unique.
    """

    def __init__(self, products: Iterable[Union[Product, Dict[str, Any]]]) -> None:
        items = tuple(
            product if isinstance(product, Product) else Product.model_validate(product)
            for product in products
        )

        by_id: Dict[int, Product] = {}
        for product in items:
            if product.id in by_id:
                raise ValueError(f"Duplicate product id in catalog: {product.id}")
            by_id[product.id] = product

        self._products: Tuple[Product, ...] = items
        self._by_id = by_id

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(self._by_id)

    def snapshot(self) -> List[Product]:
        """Full catalog as a fresh list, in insertion order."""
        return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __repr__(self) -> str:
        return f"CatalogStore(size={len(self._products)})"


@lru_cache(maxsize=1)
def get_catalog_store() -> CatalogStore:
    """Default store loaded from SAMPLE_PRODUCTS, built once per process."""
    store = CatalogStore(SAMPLE_PRODUCTS)
    logger.info(f"Catalog loaded with {len(store)} products")
    return store
