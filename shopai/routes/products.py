"""
FastAPI routes for the product catalog.

Endpoints:
- GET /products: Full catalog ("Featured Products" before any query)
"""

import logging

from fastapi import APIRouter, Depends

from shopai.schemas.products import CatalogResponse
from shopai.services.catalog_store import CatalogStore, get_catalog_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["products"]
)


@router.get(
    "",
    response_model=CatalogResponse,
    status_code=200,
    summary="List the full catalog",
)
async def list_products_endpoint(
    catalog: CatalogStore = Depends(get_catalog_store),
) -> CatalogResponse:
    """Return every product in catalog order."""
    logger.debug(f"GET /products called, catalog_size={len(catalog)}")
    return CatalogResponse(products=catalog.snapshot(), count=len(catalog))
