import logging
import re

from navigator.prompts.tourism_prompt import (
    LOCATION_KNOWN_GUIDANCE,
    LOCATION_UNKNOWN_GUIDANCE,
    TOURISM_PROMPT,
)
from navigator.schemas import AnswerOutput, GenerationRequest, GenerationResult
from navigator.tools import tools
from navigator.validation import validate

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = (
    "I'm sorry, I encountered an issue processing your request. "
    "Could you please try again or rephrase your question?"
)

DEVELOPER_ATTRIBUTION = "Fabena Franklin Fernandez @shadow"

# "who made you", "Who created you?", "so who developed you" ... but not "who made your itinerary".
_DEVELOPER_QUESTION = re.compile(r"\bwho\s+(?:created|developed|made|built|designed)\s+you\b", re.IGNORECASE)


def asks_for_developer(query: str) -> bool:
    return bool(_DEVELOPER_QUESTION.search(query))


def render_prompt(request: GenerationRequest, template: str = TOURISM_PROMPT) -> str:
    """Fill the persona template with the location block that fits the request."""
    location = request.user_location
    if location is None:
        guidance = LOCATION_UNKNOWN_GUIDANCE
    else:
        guidance = LOCATION_KNOWN_GUIDANCE.format(latitude=location.latitude, longitude=location.longitude)
    return template.format(location_guidance=guidance)


def _reconcile(raw) -> GenerationResult:
    outcome = validate(AnswerOutput, raw)
    if not outcome.ok and outcome.failed_fields() == {"mapUrl"}:
        logger.warning("Dropping unusable mapUrl from model output: %r", raw.get("mapUrl"))
        outcome = validate(AnswerOutput, {k: v for k, v in raw.items() if k != "mapUrl"})

    if not outcome.ok:
        logger.error("Model did not return a valid answer (%s); using fallback. Output: %r", outcome.errors, raw)
        return GenerationResult(answer=FALLBACK_ANSWER)

    output = outcome.value
    return GenerationResult(answer=output.answer, map_url=output.map_url)


async def generate_answer(client, request: GenerationRequest, *, prompt_template: str = TOURISM_PROMPT) -> GenerationResult:
    """Answer a tourism (or any other) query in persona.

    Bad or missing model output resolves to :data:`FALLBACK_ANSWER`; only a
    :class:`~navigator.errors.CompletionServiceError` escapes.
    """
    if asks_for_developer(request.query):
        logger.info("Developer question detected; answering with attribution")
        return GenerationResult(answer=DEVELOPER_ATTRIBUTION)

    if request.user_location is None:
        logger.info("Generating answer without user location")
    else:
        logger.info("Generating answer with user location")

    raw = await client.complete(
        system_prompt=render_prompt(request, prompt_template),
        user_message=request.query,
        output_schema=AnswerOutput,
        tools=tools,
    )
    return _reconcile(raw)
