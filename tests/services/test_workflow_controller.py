"""
Tests for the WorkflowController state machine.

The RecommendationClient is mocked; every test drives the controller from
inside the pytest-asyncio event loop, as the API does.

Covers:
- End-to-end scenarios (match, no match, remote failure, empty input)
- Loading state and listener notifications
- Reset semantics and idempotence
- Overlapping submits (latest wins, stale results never publish)
"""

import asyncio

import pytest

from shopai.schemas.recommendations import (
    DisplayState,
    RecommendationFailed,
    RecommendationMatched,
    RecommendationNoMatch,
)
from shopai.services.errors import (
    ClientNotConfiguredError,
    EmptyResponseError,
    InputError,
    MalformedResponseError,
    TransportError,
)
from shopai.services.workflow_controller import WorkflowController, parse_query
from shopai.utils.constants import CONNECTIVITY_ERROR_MESSAGE, NO_MATCH_MESSAGE


@pytest.fixture
def controller(catalog_store, mock_recommendation_client):
    return WorkflowController(catalog=catalog_store, client=mock_recommendation_client)


@pytest.fixture
def published(controller):
    """Every DisplayState the controller publishes, in order."""
    states = []
    controller.subscribe(states.append)
    return states


# =============================================================================
# UNIT TESTS: Query parsing
# =============================================================================

class TestParseQuery:

    def test_trims(self):
        assert parse_query("  gaming laptop  ").text == "gaming laptop"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_rejects_blank(self, text):
        with pytest.raises(InputError):
            parse_query(text)


# =============================================================================
# INITIAL STATE
# =============================================================================

class TestInitialState:

    def test_idle_with_full_catalog(self, controller, catalog_store):
        state = controller.state
        assert state.status == "IDLE"
        assert state.products == catalog_store.snapshot()
        assert state.is_loading is False
        assert state.error is None
        assert state.is_filtered is False
        assert state.current_query == ""
        assert state.can_reset is False
        assert state.item_count == 3


# =============================================================================
# END-TO-END SCENARIOS
# =============================================================================

class TestScenarios:

    @pytest.mark.asyncio
    async def test_gaming_laptop_matches_single_product(self, controller, mock_recommendation_client):
        """Gaming laptop query matches exactly product 3."""
        mock_recommendation_client.recommend.return_value = [3]

        result = await controller.run_query("gaming laptop under 1500")

        assert isinstance(result, RecommendationMatched)
        assert [p.id for p in result.products] == [3]

        state = controller.state
        assert state.status == "MATCHED"
        assert [p.id for p in state.products] == [3]
        assert state.is_filtered is True
        assert state.is_loading is False
        assert state.error is None
        assert state.current_query == "gaming laptop under 1500"

    @pytest.mark.asyncio
    async def test_out_of_catalog_request_is_no_match(self, controller, mock_recommendation_client):
        """Luxury yacht: empty id list gives the catalog-mismatch notice."""
        mock_recommendation_client.recommend.return_value = []

        result = await controller.run_query("luxury yacht")

        assert result == RecommendationNoMatch(query="luxury yacht")

        state = controller.state
        assert state.status == "NO_MATCH"
        assert state.products == []
        assert state.error == NO_MATCH_MESSAGE
        assert state.is_filtered is True
        assert state.is_loading is False
        assert state.can_reset is True

    @pytest.mark.asyncio
    async def test_unknown_ids_are_no_match(self, controller, mock_recommendation_client):
        mock_recommendation_client.recommend.return_value = [404, 500]

        result = await controller.run_query("something imaginary")

        assert isinstance(result, RecommendationNoMatch)
        assert controller.state.error == NO_MATCH_MESSAGE

    @pytest.mark.asyncio
    async def test_server_error_shows_generic_message(self, controller, mock_recommendation_client):
        """HTTP 500: generic message, no status text leaked."""
        mock_recommendation_client.recommend.side_effect = TransportError(
            status="Internal Server Error", status_code=500
        )

        result = await controller.run_query("gaming laptop")

        assert isinstance(result, RecommendationFailed)
        assert "500" in result.reason

        state = controller.state
        assert state.status == "FAILED"
        assert state.error == CONNECTIVITY_ERROR_MESSAGE
        assert "500" not in state.error
        assert "Internal Server Error" not in state.error
        assert state.is_loading is False
        assert state.products == []
        assert state.is_filtered is True
        assert state.can_reset is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        EmptyResponseError("No response from AI"),
        MalformedResponseError("Response is not valid JSON"),
        ClientNotConfiguredError("GOOGLE_API_KEY not configured"),
    ])
    async def test_contract_violations_look_like_transport_failures(
        self, controller, mock_recommendation_client, error
    ):
        mock_recommendation_client.recommend.side_effect = error

        await controller.run_query("phone")

        assert controller.state.status == "FAILED"
        assert controller.state.error == CONNECTIVITY_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_unexpected_client_error_settles_as_failed(
        self, controller, mock_recommendation_client, published
    ):
        mock_recommendation_client.recommend.side_effect = RuntimeError("socket closed")

        result = await controller.run_query("phone")

        assert isinstance(result, RecommendationFailed)
        assert "RuntimeError" in result.reason

        state = controller.state
        assert state.status == "FAILED"
        assert state.is_loading is False
        assert state.error == CONNECTIVITY_ERROR_MESSAGE
        assert "socket closed" not in state.error
        assert [s.status for s in published] == ["LOADING", "FAILED"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   "])
    async def test_blank_query_is_ignored(
        self, controller, mock_recommendation_client, published, text
    ):
        before = controller.state

        assert controller.submit(text) is None
        assert await controller.run_query(text) is None

        assert controller.state is before
        assert published == []
        mock_recommendation_client.recommend.assert_not_awaited()


# =============================================================================
# LOADING AND NOTIFICATIONS
# =============================================================================

class TestLoading:

    @pytest.mark.asyncio
    async def test_loading_state_keeps_displayed_products(
        self, controller, mock_recommendation_client, catalog_store
    ):
        release = asyncio.Event()

        async def slow_recommend(prompt):
            await release.wait()
            return [1]

        mock_recommendation_client.recommend.side_effect = slow_recommend

        task = controller.submit("  phone ")
        await asyncio.sleep(0)

        loading = controller.state
        assert loading.status == "LOADING"
        assert loading.is_loading is True
        assert loading.error is None
        assert loading.current_query == "phone"
        assert loading.products == catalog_store.snapshot()
        assert loading.is_filtered is False

        release.set()
        await task
        assert controller.state.status == "MATCHED"

    @pytest.mark.asyncio
    async def test_submit_clears_previous_error(self, controller, mock_recommendation_client):
        mock_recommendation_client.recommend.return_value = []
        await controller.run_query("luxury yacht")
        assert controller.state.error is not None

        release = asyncio.Event()

        async def slow_recommend(prompt):
            await release.wait()
            return [2]

        mock_recommendation_client.recommend.side_effect = slow_recommend
        task = controller.submit("cheap phone")

        assert controller.state.error is None
        assert controller.state.is_loading is True

        release.set()
        await task

    @pytest.mark.asyncio
    async def test_listeners_see_loading_then_settled(
        self, controller, mock_recommendation_client, published
    ):
        mock_recommendation_client.recommend.return_value = [2]

        await controller.run_query("cheap phone")

        assert [s.status for s in published] == ["LOADING", "MATCHED"]
        assert all(isinstance(s, DisplayState) for s in published)
        assert published[-1] is controller.state

    @pytest.mark.asyncio
    async def test_unsubscribe(self, controller, mock_recommendation_client):
        states = []
        unsubscribe = controller.subscribe(states.append)
        unsubscribe()
        unsubscribe()

        mock_recommendation_client.recommend.return_value = [2]
        await controller.run_query("cheap phone")

        assert states == []

    @pytest.mark.asyncio
    async def test_prompt_carries_catalog_and_query(self, controller, mock_recommendation_client):
        mock_recommendation_client.recommend.return_value = [3]

        await controller.run_query("gaming laptop")

        prompt = mock_recommendation_client.recommend.await_args.args[0]
        assert prompt.user_message == 'User Request: "gaming laptop"'
        assert "ProGamer Laptop 15" in prompt.instructions

    def test_submit_requires_running_loop(self, controller):
        with pytest.raises(RuntimeError):
            controller.submit("phone")
        assert controller.state.status == "IDLE"


# =============================================================================
# RESET
# =============================================================================

class TestReset:

    @pytest.mark.asyncio
    async def test_reset_restores_full_catalog(
        self, controller, mock_recommendation_client, catalog_store
    ):
        mock_recommendation_client.recommend.return_value = [3]
        await controller.run_query("gaming laptop")

        state = controller.reset()

        assert state is controller.state
        assert state.status == "IDLE"
        assert state.products == catalog_store.snapshot()
        assert state.is_filtered is False
        assert state.error is None
        assert state.current_query == ""
        assert state.can_reset is False

    @pytest.mark.asyncio
    async def test_reset_after_failure(self, controller, mock_recommendation_client):
        mock_recommendation_client.recommend.side_effect = TransportError(status="boom")
        await controller.run_query("phone")

        assert controller.reset().error is None

    @pytest.mark.asyncio
    async def test_reset_is_idempotent(self, controller, mock_recommendation_client):
        mock_recommendation_client.recommend.return_value = []
        await controller.run_query("luxury yacht")

        once = controller.reset()
        twice = controller.reset()

        assert once == twice

    def test_reset_from_idle_equals_initial(self, controller):
        initial = controller.state
        assert controller.reset() == initial

    @pytest.mark.asyncio
    async def test_reset_cancels_inflight(self, controller, mock_recommendation_client, published):
        started = asyncio.Event()

        async def never_returns(prompt):
            started.set()
            await asyncio.Event().wait()

        mock_recommendation_client.recommend.side_effect = never_returns

        task = controller.submit("phone")
        await started.wait()

        controller.reset()
        await asyncio.wait({task})

        assert task.cancelled()
        assert controller.state.status == "IDLE"
        assert [s.status for s in published] == ["LOADING", "IDLE"]


# =============================================================================
# OVERLAPPING SUBMITS
# =============================================================================

class TestOverlappingSubmits:

    @pytest.mark.asyncio
    async def test_latest_submit_wins(self, controller, mock_recommendation_client, published):
        first_started = asyncio.Event()

        async def recommend(prompt):
            if "first" in prompt.user_message:
                first_started.set()
                await asyncio.Event().wait()
            return [2]

        mock_recommendation_client.recommend.side_effect = recommend

        first = controller.submit("first query")
        await first_started.wait()
        second = controller.submit("second query")

        await asyncio.wait({first, second})

        assert first.cancelled()
        assert controller.state.status == "MATCHED"
        assert controller.state.current_query == "second query"
        assert [p.id for p in controller.state.products] == [2]
        assert [s.status for s in published] == ["LOADING", "LOADING", "MATCHED"]

    @pytest.mark.asyncio
    async def test_superseded_run_query_returns_none(self, controller, mock_recommendation_client):
        first_started = asyncio.Event()

        async def recommend(prompt):
            if "first" in prompt.user_message:
                first_started.set()
                await asyncio.Event().wait()
            return [1]

        mock_recommendation_client.recommend.side_effect = recommend

        pending = asyncio.ensure_future(controller.run_query("first query"))
        await first_started.wait()
        second = await controller.run_query("second query")

        assert await pending is None
        assert isinstance(second, RecommendationMatched)

    @pytest.mark.asyncio
    async def test_stale_result_is_not_published(self, controller, mock_recommendation_client):
        """A cycle that finishes after being superseded must not overwrite state."""
        release_first = asyncio.Event()
        first_started = asyncio.Event()

        async def recommend(prompt):
            if "first" in prompt.user_message:
                first_started.set()
                await release_first.wait()
                return [3]
            return [1]

        mock_recommendation_client.recommend.side_effect = recommend

        first = controller.submit("first query")
        await first_started.wait()

        # Simulate a completion racing the cancellation: the first cycle is
        # still allowed to finish, but its sequence number is now stale.
        controller._inflight = None
        second = controller.submit("second query")
        await second

        release_first.set()
        stale_result = await first

        assert [p.id for p in stale_result.products] == [3]
        assert controller.state.current_query == "second query"
        assert [p.id for p in controller.state.products] == [1]
