"""
FastAPI routes for the recommendation workflow.

These endpoints are the presentation seam: they forward user actions to the
WorkflowController and hand back the DisplayState it publishes. The remote
recommender is only ever reached through the controller.

Endpoints:
- GET  /recommendations/state: Current DisplayState
- POST /recommendations/query: Run one recommendation cycle
- POST /recommendations/reset: Back to the full catalog
- GET  /recommendations/suggestions: Example queries for the search box
"""

import logging

from fastapi import APIRouter, Depends

from shopai.schemas.recommendations import (
    DisplayState,
    RecommendationQueryRequest,
    SuggestedQuery,
    SuggestionsResponse,
)
from shopai.services.workflow_controller import WorkflowController, get_workflow_controller
from shopai.utils.constants import SUGGESTED_QUERIES
from shopai.utils.logging import preview

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get(
    "/state",
    response_model=DisplayState,
    status_code=200,
    summary="Current display state",
)
async def get_state_endpoint(
    controller: WorkflowController = Depends(get_workflow_controller),
) -> DisplayState:
    """Return the state renderers should display right now."""
    return controller.state


@router.post(
    "/query",
    response_model=DisplayState,
    status_code=200,
    summary="Query product recommendations",
    description="""
    Filters the catalog with a free-text request.

    **Frontend Flow:**
    1. User types what they want ("gaming laptop under 1500") and clicks Find
    2. POST /recommendations/query with the text
    3. Receive the settled DisplayState:
       - MATCHED: render `products` under "Results for ..."
       - NO_MATCH: render `error` and a "Show all products" button
       - FAILED: render the generic `error` and a "Show all products" button

    Whitespace-only text is ignored and the current state is returned unchanged.
    If a newer query or a reset supersedes this one, the newer state is returned.
    """
)
async def query_recommendations_endpoint(
    request: RecommendationQueryRequest,
    controller: WorkflowController = Depends(get_workflow_controller),
) -> DisplayState:
    """Run one recommendation cycle and return the resulting state."""
    logger.info(f"POST /recommendations/query called, query='{preview(request.query)}'")

    # Remote failures are already folded into DisplayState by the controller
    await controller.run_query(request.query)

    state = controller.state
    logger.info(f"Returning state with status={state.status}")
    return state


@router.post(
    "/reset",
    response_model=DisplayState,
    status_code=200,
    summary="Clear the filter",
    description="Restores the full catalog, clears the query and any error. Idempotent.",
)
async def reset_recommendations_endpoint(
    controller: WorkflowController = Depends(get_workflow_controller),
) -> DisplayState:
    """Clear filter / brand link handler."""
    logger.info("POST /recommendations/reset called")
    return controller.reset()


@router.get(
    "/suggestions",
    response_model=SuggestionsResponse,
    status_code=200,
    summary="Example queries",
)
async def list_suggestions_endpoint() -> SuggestionsResponse:
    """Example prompts shown under the search box ("Try asking: ...")."""
    return SuggestionsResponse(
        suggestions=[
            SuggestedQuery(label=label, query=query)
            for label, query in SUGGESTED_QUERIES.items()
        ]
    )
