"""
Pytest configuration for ShopAI backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from google.genai import types  # noqa: E402

from shopai.schemas.products import Product  # noqa: E402
from shopai.services.catalog_store import CatalogStore  # noqa: E402
from shopai.services.recommendation_client import RecommendationClient  # noqa: E402


@pytest.fixture
def fixture_products():
    """Three-product catalog, ids {1, 2, 3}."""
    return [
        Product(
            id=1,
            name="Zenith X5 Smartphone",
            category="Electronics",
            price=699,
            description="High-performance device with OLED display and 5G connectivity.",
        ),
        Product(
            id=2,
            name="Budget Buddy Phone",
            category="Electronics",
            price=199,
            description="Reliable smartphone with long battery life, perfect for students.",
        ),
        Product(
            id=3,
            name="ProGamer Laptop 15",
            category="Computers",
            price=1299,
            description="RTX 4060 equipped laptop designed for high-end gaming and rendering.",
        ),
    ]


@pytest.fixture
def catalog_store(fixture_products):
    """CatalogStore built from the fixture catalog."""
    return CatalogStore(fixture_products)


@pytest.fixture
def mock_recommendation_client():
    """RecommendationClient stand-in whose recommend() is an AsyncMock."""
    client = MagicMock(spec=RecommendationClient)
    client.recommend = AsyncMock(return_value=[])
    return client


@pytest.fixture
def make_gemini_response():
    """Factory: GenerateContentResponse whose first part carries `text`."""
    def _make(text):
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    content=types.Content(
                        role="model",
                        parts=[types.Part(text=text)],
                    )
                )
            ]
        )

    return _make


@pytest.fixture
def mock_genai_client():
    """
    Mock google-genai client.

    Set `mock_genai_client.aio.models.generate_content.return_value` (or
    side_effect) in the test.
    """
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock()
    return mock_client
