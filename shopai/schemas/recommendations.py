"""
Pydantic schemas for the recommendation workflow.

These models define the contracts between the prompt builder, the
recommendation client, the result reconciler and the workflow controller,
plus the request/response models of the /recommendations endpoints.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from shopai.schemas.products import Product

# ============================================================================
# WORKFLOW INPUT
# ============================================================================

class Query(BaseModel):
    """
    One user submission.

    Text is trimmed on construction and must not be empty afterwards.
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        description="User's natural language description of what they want to buy",
        min_length=1,
        examples=["gaming laptop under 1500", "Best headphones for travel"]
    )

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class RecommendationPrompt(BaseModel):
    """Instruction text and user message sent to the remote recommender."""
    model_config = ConfigDict(frozen=True)

    instructions: str = Field(
        ...,
        description="System instruction: output contract, selection rules and serialized catalog"
    )
    user_message: str = Field(
        ...,
        description="User turn carrying the query text"
    )


# ============================================================================
# REMOTE PAYLOAD
# ============================================================================

class RecommendedIdsPayload(BaseModel):
    """
    Decoded inner JSON returned by the remote recommender.

    A missing (or null) `recommendedIds` key means the model had no opinion
    and is read as an empty list. Anything present must be a list of integers.
    """
    recommended_ids: Optional[List[int]] = Field(
        None,
        alias="recommendedIds",
        description="Candidate product ids, not yet checked against the catalog"
    )

    @field_validator("recommended_ids", mode="before")
    @classmethod
    def reject_non_integers(cls, value: Any) -> Any:
        if value is None:
            return value
        if not isinstance(value, list):
            raise ValueError("recommendedIds must be an array")
        for item in value:
            # bool is an int subclass and "3" would be coerced in lax mode
            if isinstance(item, bool) or not isinstance(item, (int, float)):
                raise ValueError(f"recommendedIds contains a non-integer value: {item!r}")
            if isinstance(item, float) and not item.is_integer():
                raise ValueError(f"recommendedIds contains a non-integer value: {item!r}")
        return [int(item) for item in value]

    @property
    def ids(self) -> List[int]:
        return self.recommended_ids or []


# ============================================================================
# RECONCILED RESULTS
# ============================================================================

class RecommendationMatched(BaseModel):
    """At least one recommended id matched the catalog."""
    status: Literal["MATCHED"] = Field(
        "MATCHED",
        description="Indicates catalog products were selected"
    )
    products: List[Product] = Field(
        ...,
        description="Matching products in catalog order, without duplicates",
        min_length=1
    )


class RecommendationNoMatch(BaseModel):
    """
    The recommender returned nothing usable.

    Covers both an empty id list and a list of ids unknown to the catalog.
    """
    status: Literal["NO_MATCH"] = Field(
        "NO_MATCH",
        description="Indicates no catalog product matches the query"
    )
    query: str = Field(
        ...,
        description="The query that produced no matches"
    )


class RecommendationFailed(BaseModel):
    """The remote call failed or violated its output contract."""
    status: Literal["FAILED"] = Field(
        "FAILED",
        description="Indicates the recommendation cycle failed"
    )
    reason: str = Field(
        ...,
        description="Diagnostic reason (server side only, never shown to the user)"
    )


# Tagged union, discriminated on `status`
RecommendationResult = Annotated[
    Union[RecommendationMatched, RecommendationNoMatch, RecommendationFailed],
    Field(discriminator="status"),
]


# ============================================================================
# DISPLAY STATE
# ============================================================================

DisplayStatus = Literal["IDLE", "LOADING", "MATCHED", "NO_MATCH", "FAILED"]


class DisplayState(BaseModel):
    """
    Single source of truth for rendering.

    Replaced as a whole by the WorkflowController at every transition;
    renderers only read it.
    """
    model_config = ConfigDict(frozen=True)

    status: DisplayStatus = Field(
        "IDLE",
        description="Workflow phase (IDLE before any query or after reset)"
    )
    products: List[Product] = Field(
        ...,
        description="Products to render"
    )
    is_loading: bool = Field(
        False,
        description="True while a recommendation request is in flight"
    )
    error: Optional[str] = Field(
        None,
        description="User-facing message for NO_MATCH or FAILED outcomes"
    )
    is_filtered: bool = Field(
        False,
        description="False only when products is the full catalog"
    )
    current_query: str = Field(
        "",
        description="Trimmed text of the last submitted query"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def item_count(self) -> int:
        return len(self.products)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def can_reset(self) -> bool:
        """Whether the 'show all products' affordance should be offered."""
        return self.is_filtered or self.error is not None


# ============================================================================
# HTTP MODELS
# ============================================================================

class RecommendationQueryRequest(BaseModel):
    """
    Request body for POST /recommendations/query.

    Whitespace-only text is accepted and ignored (no state change), the same
    way an inert submit button behaves.
    """
    query: str = Field(
        ...,
        description="Free-text description of the desired product",
        examples=["gaming laptop under 1500", "Cheap smartphone for kids"]
    )


class SuggestedQuery(BaseModel):
    """An example prompt offered next to the search box."""
    label: str = Field(..., examples=["Headphones for travel"])
    query: str = Field(..., examples=["Best headphones for travel"])


class SuggestionsResponse(BaseModel):
    """Response model for GET /recommendations/suggestions."""
    suggestions: List[SuggestedQuery]
