"""
Pydantic schemas for catalog products.

Products are immutable once loaded into the CatalogStore.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    A single purchasable catalog entry.

    Owned by the CatalogStore; every other component treats it as read-only.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Unique, stable product identifier",
        examples=[3]
    )
    name: str = Field(
        ...,
        description="Display name",
        examples=["ProGamer Laptop 15"]
    )
    category: str = Field(
        ...,
        description="Catalog category",
        examples=["Computers", "Audio"]
    )
    price: float = Field(
        ...,
        description="Unit price in USD",
        ge=0,
        examples=[1299.0]
    )
    description: str = Field(
        ...,
        description="Free-text feature description matched against user requests",
        examples=["RTX 4060 equipped laptop designed for high-end gaming and rendering."]
    )


class CatalogResponse(BaseModel):
    """Response model for GET /products."""
    products: List[Product] = Field(
        ...,
        description="Full catalog in insertion order"
    )
    count: int = Field(
        ...,
        description="Number of products in the catalog",
        ge=0
    )
