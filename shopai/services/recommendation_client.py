"""
Recommendation Client - Gemini with structured JSON output

Performs the single network round-trip of a recommendation cycle.

Architecture:
- API: Google Gen AI Python SDK (google-genai), async surface (client.aio)
- Model: Gemini 2.5 Flash (GEMINI_MODEL)
- Output: response_mime_type='application/json', so the model answers with
  a bare JSON object instead of prose or fenced code
- One attempt per call: no retries, no timeout beyond the SDK default.
  Callers wanting bounded latency cancel the awaiting task.

Failure mapping:
- Non-success status / network failure -> TransportError
- No text in candidates[0].content.parts[0] -> EmptyResponseError
- Text is not a JSON object with an integer array -> MalformedResponseError
- Missing "recommendedIds" key -> [] (the model's "no opinion" signal)

Returned ids are NOT checked against the catalog here; that is the
reconciler's job.
"""

import json
import logging
from typing import List, Optional

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from shopai.config import settings
from shopai.schemas.recommendations import RecommendationPrompt, RecommendedIdsPayload
from shopai.services.errors import (
    ClientNotConfiguredError,
    EmptyResponseError,
    MalformedResponseError,
    TransportError,
)

logger = logging.getLogger(__name__)

RESPONSE_MIME_TYPE = "application/json"


class RecommendationClient:
    """
    Async client for the remote recommender.

    The credential is a constructor argument; it is never read from a
    module-level constant. A pre-built genai.Client can be injected (tests).
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.2,
        client: Optional[genai.Client] = None,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    def _get_client(self) -> genai.Client:
        """Lazy initialization of the Gemini client."""
        if self._client is not None:
            return self._client

        if not self._api_key:
            raise ClientNotConfiguredError(
                "GOOGLE_API_KEY not configured. Set it in your .env file."
            )

        self._client = genai.Client(api_key=self._api_key)
        logger.info("Gemini client initialized successfully for recommendations")
        return self._client

    def _build_config(self, prompt: RecommendationPrompt) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=prompt.instructions,
            response_mime_type=RESPONSE_MIME_TYPE,
            temperature=self.temperature,
        )

    async def recommend(self, prompt: RecommendationPrompt) -> List[int]:
        """
        Ask the remote recommender which catalog ids fit the prompt.

        Exactly one outbound request per call.

        Args:
            prompt: Output of build_recommendation_prompt()

        Returns:
            Candidate ids, verbatim and in the order the model gave them

        Raises:
            ClientNotConfiguredError: No credential configured
            TransportError: Non-success status or network failure
            EmptyResponseError: No text in the first candidate
            MalformedResponseError: Text is not the expected JSON object
        """
        client = self._get_client()

        logger.info(f"Calling Gemini API (model={self.model}) for recommendations...")
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt.user_message,
                config=self._build_config(prompt),
            )
        except errors.APIError as e:
            raise TransportError(
                status=e.status or e.message or "unknown status",
                status_code=e.code,
            ) from e
        except Exception as e:
            raise TransportError(status=f"{type(e).__name__}: {e}") from e

        text = _extract_text(response)
        if not text:
            logger.error("Empty text in Gemini response")
            raise EmptyResponseError("No response from AI")

        ids = _parse_recommended_ids(text)
        logger.info(f"Gemini recommended ids: {ids}")
        return ids


def _extract_text(response: types.GenerateContentResponse) -> Optional[str]:
    """Text of the first part of the first candidate, if any."""
    if not response.candidates:
        return None

    content = response.candidates[0].content
    if content is None or not content.parts:
        return None

    return content.parts[0].text


def _parse_recommended_ids(text: str) -> List[int]:
    """Decode the model's JSON text and validate the id list."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integer literals, excessive nesting
        logger.error(f"Failed to parse JSON response: {e}")
        logger.error(f"Raw content: {text[:500]}")
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        logger.error(f"Expected a JSON object, got {type(data).__name__}")
        raise MalformedResponseError(
            f"Response JSON must be an object, got {type(data).__name__}"
        )

    try:
        payload = RecommendedIdsPayload.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid recommendedIds in response: {e.errors()}")
        raise MalformedResponseError("recommendedIds must be an array of integers") from e

    return payload.ids


# Default client built from settings (lazy initialization)
_default_client: Optional[RecommendationClient] = None


def get_recommendation_client() -> RecommendationClient:
    """Return the process-wide client configured from environment settings."""
    global _default_client

    if _default_client is None:
        if not settings.GOOGLE_API_KEY:
            logger.warning(
                "GOOGLE_API_KEY not configured. Recommendation requests will fail. "
                "Please set GOOGLE_API_KEY in your .env file."
            )
        _default_client = RecommendationClient(
            api_key=settings.GOOGLE_API_KEY,
            model=settings.GEMINI_MODEL,
            temperature=settings.GEMINI_TEMPERATURE,
        )

    return _default_client
