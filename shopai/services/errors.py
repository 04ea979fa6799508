"""
Error taxonomy for the recommendation workflow.

Everything raised across the remote boundary derives from RecommendationError,
so the WorkflowController can convert any failure into DisplayState with a
single except clause. Messages are diagnostic; they are logged, never shown.
"""

from typing import Optional


class RecommendationError(Exception):
    """Base class for recommendation workflow failures."""


class InputError(RecommendationError):
    """Query text is empty or whitespace-only. Rejected before any network call."""


class ClientNotConfiguredError(RecommendationError):
    """No credential was provided for the remote recommender."""


class TransportError(RecommendationError):
    """The remote call did not complete with a success status."""

    def __init__(self, status: str, status_code: Optional[int] = None) -> None:
        self.status = status
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"Remote recommender returned {status_code}: {status}")
        else:
            super().__init__(f"Remote recommender unreachable: {status}")


class EmptyResponseError(RecommendationError):
    """The response had no text in its first candidate's first part."""


class MalformedResponseError(RecommendationError):
    """The response text was not the JSON object the prompt asked for."""
