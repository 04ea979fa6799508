"""
LLM prompt components for the ShopAI backend.

Recommendation System (single-shot structured output)
   - Uses Gemini with response_mime_type='application/json'
   - NOT an ADK agent - one request, one JSON reply containing product ids
   - The network call lives in: shopai/services/recommendation_client.py
"""

from shopai.agents.recommendation import (
    RECOMMENDATION_SYSTEM_PROMPT,
    build_recommendation_prompt,
)

__all__ = [
    "RECOMMENDATION_SYSTEM_PROMPT",
    "build_recommendation_prompt",
]
