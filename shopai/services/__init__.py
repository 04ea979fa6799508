"""
Service layer for the ShopAI backend.

Contains the recommendation workflow:
- CatalogStore: immutable product snapshot (ground truth)
- RecommendationClient: single Gemini round-trip returning candidate ids
- reconcile: maps candidate ids back onto catalog products
- WorkflowController: drives the cycle and owns DisplayState

Routes call the WorkflowController only; they never touch the client directly.
"""

from .catalog_store import CatalogStore, get_catalog_store
from .errors import (
    ClientNotConfiguredError,
    EmptyResponseError,
    InputError,
    MalformedResponseError,
    RecommendationError,
    TransportError,
)
from .recommendation_client import RecommendationClient, get_recommendation_client
from .result_reconciler import reconcile
from .workflow_controller import WorkflowController, get_workflow_controller, parse_query

__all__ = [
    "CatalogStore",
    "get_catalog_store",
    "RecommendationClient",
    "get_recommendation_client",
    "reconcile",
    "WorkflowController",
    "get_workflow_controller",
    "parse_query",
    "RecommendationError",
    "InputError",
    "ClientNotConfiguredError",
    "TransportError",
    "EmptyResponseError",
    "MalformedResponseError",
]
