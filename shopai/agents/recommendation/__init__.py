"""
Recommendation System - Catalog-Filtering LLM Architecture

This module contains the prompt templates for the Gemini-based recommender.

Architecture:
- Pattern: Single-shot filter (one API call, no tools, no conversation)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Temperature: 0.2 (near-deterministic)
- Output: JSON object {"recommendedIds": [int, ...]} via response_mime_type

The network client is in:
- shopai/services/recommendation_client.py

Prompt templates are in:
- shopai/agents/recommendation/prompts.py
"""

from shopai.agents.recommendation.prompts import (
    RECOMMENDATION_SYSTEM_PROMPT,
    build_recommendation_prompt,
    serialize_catalog,
)

__all__ = [
    "RECOMMENDATION_SYSTEM_PROMPT",
    "build_recommendation_prompt",
    "serialize_catalog",
]
