"""
Result Reconciler - maps untrusted candidate ids onto catalog products.

Pure function, no I/O. Ids the catalog does not know are dropped, so a
hallucinated id degrades to a NO_MATCH instead of an error.
"""

import logging
from typing import Iterable, List, Sequence, Set

from shopai.schemas.products import Product
from shopai.schemas.recommendations import (
    RecommendationMatched,
    RecommendationNoMatch,
    RecommendationResult,
)

logger = logging.getLogger(__name__)


def reconcile(
    ids: Sequence[int],
    catalog: Iterable[Product],
    query: str,
) -> RecommendationResult:
    """
    Classify a recommender reply against the catalog.

    Args:
        ids: Candidate ids from the RecommendationClient (may repeat or be unknown)
        catalog: Trusted products, in catalog order
        query: Query text, echoed back on NO_MATCH

    Returns:
        RecommendationMatched with products in catalog order (not `ids` order),
        each at most once; otherwise RecommendationNoMatch
    """
    if not ids:
        return RecommendationNoMatch(query=query)

    wanted: Set[int] = set(ids)
    seen: Set[int] = set()
    products: List[Product] = []

    for product in catalog:
        if product.id in wanted and product.id not in seen:
            seen.add(product.id)
            products.append(product)

    unknown = wanted - seen
    if unknown:
        logger.warning(f"Ignoring ids not present in catalog: {sorted(unknown)}")

    if not products:
        return RecommendationNoMatch(query=query)

    return RecommendationMatched(products=products)
