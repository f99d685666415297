import asyncio
import logging
import random

from langchain.agents.middleware import wrap_model_call

logger = logging.getLogger(__name__)

MAX_MODEL_RETRIES = 3
MODEL_INITIAL_DELAY = 1.0
MODEL_BACKOFF_FACTOR = 2.0


def backoff_delay(attempt: int) -> float:
    """Exponential backoff for ``attempt`` (0-based) plus up to 50% jitter."""
    delay = MODEL_INITIAL_DELAY * (MODEL_BACKOFF_FACTOR ** attempt)
    return delay + random.uniform(0, delay * 0.5)


async def call_with_retries(handler, request, *, sleep=asyncio.sleep):
    logger.info("Model call started")
    for attempt in range(MAX_MODEL_RETRIES):
        try:
            result = await handler(request)
            if attempt > 0:
                logger.info("Model call succeeded on attempt %d/%d", attempt + 1, MAX_MODEL_RETRIES)
            else:
                logger.info("Model call succeeded on first attempt")
            return result
        except Exception as e:
            if attempt == MAX_MODEL_RETRIES - 1:
                logger.error(
                    "Model call failed after %d attempts. Final error: %s: %s",
                    MAX_MODEL_RETRIES, type(e).__name__, e,
                )
                raise
            sleep_time = backoff_delay(attempt)
            logger.warning(
                "Model call attempt %d/%d failed (%s: %s), retrying in %.1fs",
                attempt + 1, MAX_MODEL_RETRIES, type(e).__name__, e, sleep_time,
            )
            await sleep(sleep_time)


@wrap_model_call
async def retry_model(request, handler):
    """Retry model calls on transient failures with exponential backoff + jitter."""
    return await call_with_retries(handler, request)
