from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from navigator.validation import AbsoluteUrl

MAX_QUERY_LENGTH = 500


class UserLocation(BaseModel):
    """The user's approximate position, as reported by the client."""
    latitude: float = Field(..., allow_inf_nan=False)
    longitude: float = Field(..., allow_inf_nan=False)


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    user_location: Optional[UserLocation] = None


class GenerationResult(BaseModel):
    answer: str
    map_url: Optional[str] = None


class LinkRecommendationRequest(BaseModel):
    query: str
    answer: str


class ChatResponse(BaseModel):
    """Final composite result handed back to the chat client."""

    model_config = ConfigDict(populate_by_name=True)

    answer: str
    links: list[str] = Field(default_factory=list)
    map_url: Optional[str] = Field(None, alias="mapUrl")

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict; ``mapUrl`` is left out when there is no map."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Structured output requested from the model ---


class AnswerOutput(BaseModel):
    """Answer to the user query, delivered with personality."""

    model_config = ConfigDict(populate_by_name=True)

    answer: str = Field(
        ...,
        description="The answer to the user query or a conversational response, delivered with personality.",
    )
    map_url: Optional[AbsoluteUrl] = Field(
        None,
        alias="mapUrl",
        description="A Google Maps URL relevant to the query, if a map was requested or is highly relevant.",
    )

    @field_validator("answer")
    @classmethod
    def answer_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("map_url", mode="before")
    @classmethod
    def blank_map_url_is_absent(cls, v):
        # "no map" and "empty map" are the same thing downstream.
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v


class LinksOutput(BaseModel):
    """Relevant links for further reading."""

    # Entries are checked one by one after validation, so a single bad link
    # never discards the whole list.
    links: list[Any] = Field(
        ...,
        description="An array of relevant URLs for further reading.",
        json_schema_extra={"items": {"type": "string"}},
    )
