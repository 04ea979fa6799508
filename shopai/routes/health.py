"""
Health check route for the ShopAI backend.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification.
"""

from fastapi import APIRouter, Depends

from shopai.schemas.health import HealthResponse
from shopai.services.catalog_store import CatalogStore, get_catalog_store
from shopai.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check(
    catalog: CatalogStore = Depends(get_catalog_store),
) -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "catalog_size": 12
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok", catalog_size=len(catalog))
