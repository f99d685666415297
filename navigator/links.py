import logging

from navigator.errors import CompletionServiceError
from navigator.prompts.link_prompt import LINK_RECOMMENDATION_INPUT, LINK_RECOMMENDATION_PROMPT
from navigator.schemas import LinkRecommendationRequest, LinksOutput
from navigator.validation import is_absolute_url, validate

logger = logging.getLogger(__name__)

MISSING_ANSWER_PLACEHOLDER = "(No answer provided by the primary assistant)"


def filter_links(candidates) -> list[str]:
    """Keep non-blank absolute URLs, in their original order."""
    kept = [link for link in candidates if is_absolute_url(link)]
    dropped = len(candidates) - len(kept)
    if dropped:
        logger.info("Filtered out %d invalid link(s)", dropped)
    return kept


async def recommend_links(client, request: LinkRecommendationRequest) -> list[str]:
    """Ask the model for further-reading URLs. Never raises; failures give ``[]``."""
    user_message = LINK_RECOMMENDATION_INPUT.format(
        query=request.query,
        answer=request.answer or MISSING_ANSWER_PLACEHOLDER,
    )
    try:
        raw = await client.complete(
            system_prompt=LINK_RECOMMENDATION_PROMPT,
            user_message=user_message,
            output_schema=LinksOutput,
        )
    except CompletionServiceError as e:
        logger.error("Link recommendation failed: %s", e)
        return []

    outcome = validate(LinksOutput, raw)
    if not outcome.ok:
        logger.error("Model did not return valid links: %r", raw)
        return []
    return filter_links(outcome.value.links)
