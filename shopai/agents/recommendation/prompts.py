"""
Recommendation System Prompt Templates

Contains the system prompt and the prompt builder for the RecommendationClient.

The recommender does not search anywhere: it only filters the catalog we
send it, and answers with the ids of the products that fit the request.

Prompt Engineering Pattern:
- System instruction defines the role, the output contract and the rules
- The catalog goes into the system instruction as a reduced JSON projection
  (id, name, price, category, description) to bound payload size and keep
  unrelated fields out of the model's context
- The user turn carries only the request text
"""

import json
from typing import Iterable, List

from shopai.schemas.products import Product
from shopai.schemas.recommendations import Query, RecommendationPrompt

# Fields forwarded to the model, in this order
CATALOG_PROJECTION_FIELDS = ("id", "name", "price", "category", "description")

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

RECOMMENDATION_SYSTEM_PROMPT = """You are an intelligent shopping assistant API.
Your task is to analyze a list of products and a user's natural language request.

<output_format>
Return ONLY a single valid JSON object. Do not include markdown formatting (like ```json), code fences, or explanatory text.
The JSON object must have exactly one key, "recommendedIds", which is an array of integers (product ids taken from the product list).
Example: {"recommendedIds": [3, 9]}
</output_format>

<rules>
1. Select products that match the user's criteria: price, category, and features described in each product's description.
2. If the user asks for something cheap or mentions a budget, compare against the price field.
3. Only use ids that appear in the product list. Never invent products.
4. If no products match, return an empty array: {"recommendedIds": []}
</rules>"""


def serialize_catalog(catalog: Iterable[Product]) -> str:
    """
    Serialize the catalog to the compact JSON array embedded in the prompt.

    Only CATALOG_PROJECTION_FIELDS are included.
    """
    projection: List[dict] = [
        {field: getattr(product, field) for field in CATALOG_PROJECTION_FIELDS}
        for product in catalog
    ]
    return json.dumps(projection, ensure_ascii=False)


def build_recommendation_prompt(
    query: Query,
    catalog: Iterable[Product],
) -> RecommendationPrompt:
    """
    Build the instructions and user message for one recommendation request.

    Pure function of its inputs. The caller guarantees `query.text` is
    non-empty; an empty catalog is valid and yields an empty product list.

    Args:
        query: Trimmed user query
        catalog: Products the model may choose from (normally the CatalogStore)

    Returns:
        RecommendationPrompt with `instructions` and `user_message`
    """
    instructions = (
        f"{RECOMMENDATION_SYSTEM_PROMPT}\n\n"
        f"<product_list>\n{serialize_catalog(catalog)}\n</product_list>"
    )
    user_message = f'User Request: "{query.text}"'

    return RecommendationPrompt(
        instructions=instructions,
        user_message=user_message,
    )
