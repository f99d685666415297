import asyncio
import logging
from typing import Mapping, Optional, Union

from navigator.answering import FALLBACK_ANSWER, generate_answer
from navigator.errors import AssistantUnavailableError
from navigator.links import recommend_links
from navigator.schemas import ChatResponse, GenerationRequest, LinkRecommendationRequest, UserLocation

logger = logging.getLogger(__name__)

LocationInput = Union[UserLocation, Mapping[str, float], None]


def _as_location(user_location: LocationInput) -> Optional[UserLocation]:
    if user_location is None or isinstance(user_location, UserLocation):
        return user_location
    try:
        return UserLocation(latitude=user_location["latitude"], longitude=user_location["longitude"])
    except (KeyError, TypeError) as e:
        raise ValueError(f"user_location needs latitude and longitude, got {user_location!r}") from e


async def get_ai_chat_response(
    query: str,
    user_location: LocationInput = None,
    *,
    client,
    timeout: Optional[float] = None,
) -> ChatResponse:
    """Answer ``query`` and attach recommended links.

    Link recommendation is best-effort: if it fails, the answer is returned
    with no links. Only a failure to produce an answer at all raises, as
    :class:`AssistantUnavailableError`. A malformed ``user_location`` raises
    ``ValueError`` before the service is called.
    """
    request = GenerationRequest(query=query, user_location=_as_location(user_location))
    try:
        result = await asyncio.wait_for(generate_answer(client, request), timeout)
    except Exception as e:
        logger.exception("Critical error while generating an answer")
        if isinstance(e, asyncio.TimeoutError) and timeout is not None:
            details = f"The AI service did not answer within {timeout:g}s."
        else:
            details = str(e) or "An unknown error occurred with the AI service."
        raise AssistantUnavailableError(details) from e

    if result.answer == FALLBACK_ANSWER:
        return ChatResponse(answer=result.answer, links=[])

    links: list[str] = []
    try:
        recommended = await asyncio.wait_for(
            recommend_links(client, LinkRecommendationRequest(query=query, answer=result.answer)),
            timeout,
        )
        if isinstance(recommended, list):
            links = recommended
        else:
            logger.error("Link recommendation returned %s instead of a list", type(recommended).__name__)
    except Exception:
        logger.exception("Link recommendation failed; answering without links")

    return ChatResponse(answer=result.answer, links=links, map_url=result.map_url)
