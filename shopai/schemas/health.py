"""
Health check endpoint schemas.

The health endpoint is PUBLIC and returns a simple status indicator plus
the size of the loaded catalog.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health endpoint.

    Used by load balancers, monitoring systems, and deployment checks.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "catalog_size": 12
            }
        }
    )

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    catalog_size: int = Field(
        ...,
        description="Number of products loaded in the CatalogStore",
        ge=0,
        examples=[12]
    )
