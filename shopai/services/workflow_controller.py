"""
Workflow Controller - owns DisplayState and drives the recommendation cycle.

State machine:
    IDLE --submit(query)--> LOADING --settle--> MATCHED | NO_MATCH | FAILED
    any --reset--> IDLE

All transitions run on the event loop thread; the only suspension point is
the RecommendationClient call. DisplayState is replaced as a whole at each
transition, so renderers never observe a half-applied update.

Overlapping submits: the latest one wins. Every submit and every reset
bumps a sequence number and cancels the in-flight task; a cycle whose
sequence number is no longer current never publishes.
"""

import asyncio
import logging
from functools import lru_cache
from typing import Callable, List, Optional

from pydantic import ValidationError

from shopai.agents.recommendation.prompts import build_recommendation_prompt
from shopai.schemas.recommendations import (
    DisplayState,
    Query,
    RecommendationFailed,
    RecommendationMatched,
    RecommendationNoMatch,
    RecommendationResult,
)
from shopai.services.catalog_store import CatalogStore, get_catalog_store
from shopai.services.errors import InputError, RecommendationError
from shopai.services.recommendation_client import (
    RecommendationClient,
    get_recommendation_client,
)
from shopai.services.result_reconciler import reconcile
from shopai.utils.constants import CONNECTIVITY_ERROR_MESSAGE, NO_MATCH_MESSAGE
from shopai.utils.logging import preview

logger = logging.getLogger(__name__)

StateListener = Callable[[DisplayState], None]


def parse_query(query_text: str) -> Query:
    """
    Validate raw submit text.

    Raises:
        InputError: If the text is empty or whitespace-only
    """
    try:
        return Query(text=query_text)
    except ValidationError as e:
        raise InputError("Query text must not be empty") from e


class WorkflowController:
    """
    Single writer of DisplayState.

    Must be driven from inside a running event loop: submit() schedules the
    cycle as a task on the current loop.
    """

    def __init__(self, catalog: CatalogStore, client: RecommendationClient) -> None:
        self._catalog = catalog
        self._client = client
        self._state = self._idle_state()
        self._listeners: List[StateListener] = []
        self._sequence = 0
        self._inflight: Optional["asyncio.Task[RecommendationResult]"] = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> DisplayState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with every newly published DisplayState.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def submit(self, query_text: str) -> Optional["asyncio.Task[RecommendationResult]"]:
        """
        Start a recommendation cycle (fire-and-forget).

        Empty or whitespace-only text is ignored: no state change, no request.
        A cycle already in flight is cancelled and its result discarded.

        Returns:
            The scheduled task, or None when the submission was ignored
        """
        try:
            query = parse_query(query_text)
        except InputError:
            logger.debug("Ignoring empty query submission")
            return None

        loop = asyncio.get_running_loop()

        self._cancel_inflight()
        self._sequence += 1
        sequence = self._sequence

        logger.info(f"Recommendation cycle #{sequence} started, query='{preview(query.text)}'")

        # Products and is_filtered stay as displayed until the cycle settles
        self._publish(
            self._state.model_copy(
                update={
                    "status": "LOADING",
                    "is_loading": True,
                    "error": None,
                    "current_query": query.text,
                }
            )
        )

        task = loop.create_task(self._run_cycle(query, sequence))
        self._inflight = task
        return task

    async def run_query(self, query_text: str) -> Optional[RecommendationResult]:
        """
        Submit and wait for the cycle to settle.

        Returns:
            The reconciled result, or None when the submission was ignored or
            superseded by a newer submit/reset before it settled
        """
        task = self.submit(query_text)
        if task is None:
            return None

        await asyncio.wait({task})
        if task.cancelled():
            return None
        return task.result()

    def reset(self) -> DisplayState:
        """
        Return to the full catalog.

        Cancels any in-flight cycle. Calling it repeatedly yields the same state.
        """
        self._cancel_inflight()
        self._sequence += 1
        self._publish(self._idle_state())
        logger.info("Display reset to full catalog")
        return self._state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run_cycle(self, query: Query, sequence: int) -> RecommendationResult:
        prompt = build_recommendation_prompt(query, self._catalog.products)

        result: RecommendationResult
        try:
            ids = await self._client.recommend(prompt)
        except RecommendationError as e:
            logger.error(f"Recommendation cycle #{sequence} failed ({type(e).__name__}): {e}")
            result = RecommendationFailed(reason=f"{type(e).__name__}: {e}")
        except Exception as e:
            logger.exception(f"Recommendation cycle #{sequence} failed unexpectedly")
            result = RecommendationFailed(reason=f"{type(e).__name__}: {e}")
        else:
            result = reconcile(ids, self._catalog.products, query.text)

        if sequence != self._sequence:
            logger.info(f"Discarding stale result of cycle #{sequence} (current #{self._sequence})")
            return result

        self._inflight = None
        self._publish(self._settled_state(result, query.text))
        logger.info(f"Recommendation cycle #{sequence} settled with status={result.status}")
        return result

    def _cancel_inflight(self) -> None:
        if self._inflight is not None and not self._inflight.done():
            logger.info("Cancelling in-flight recommendation request")
            self._inflight.cancel()
        self._inflight = None

    def _idle_state(self) -> DisplayState:
        return DisplayState(
            status="IDLE",
            products=self._catalog.snapshot(),
            is_loading=False,
            error=None,
            is_filtered=False,
            current_query="",
        )

    def _settled_state(self, result: RecommendationResult, query_text: str) -> DisplayState:
        if isinstance(result, RecommendationMatched):
            return DisplayState(
                status="MATCHED",
                products=list(result.products),
                is_filtered=True,
                current_query=query_text,
            )

        if isinstance(result, RecommendationNoMatch):
            return DisplayState(
                status="NO_MATCH",
                products=[],
                error=NO_MATCH_MESSAGE,
                is_filtered=True,
                current_query=query_text,
            )

        # Generic message only: transport details stay in the server log
        return DisplayState(
            status="FAILED",
            products=[],
            error=CONNECTIVITY_ERROR_MESSAGE,
            is_filtered=True,
            current_query=query_text,
        )

    def _publish(self, state: DisplayState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


@lru_cache(maxsize=1)
def get_workflow_controller() -> WorkflowController:
    """FastAPI dependency: one controller per process, wired from defaults."""
    return WorkflowController(
        catalog=get_catalog_store(),
        client=get_recommendation_client(),
    )
