"""Client for the hosted chat model.

:class:`CompletionClient` is built from :class:`~navigator.config.Settings`,
started once (FastAPI lifespan or ``async with``) and injected into the
pipeline. Each :meth:`CompletionClient.complete` call runs a small LangChain
agent: the model may call the offered tools, and its final answer is
collected through a structured-output tool whose JSON schema comes from a
pydantic model. The raw dict is returned untouched; validating it is the
caller's job.
"""

import copy
import logging
from typing import Any, Optional, Sequence

from langchain.agents import create_agent
from langchain.agents.structured_output import ToolStrategy
from langchain.chat_models import init_chat_model
from langchain_core.messages import AIMessage
from langchain_google_genai import HarmBlockThreshold, HarmCategory
from pydantic import BaseModel

from navigator.config import Settings
from navigator.errors import CompletionServiceError
from navigator.middleware import retry_model

logger = logging.getLogger(__name__)

SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_ONLY_HIGH,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_ONLY_HIGH,
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_ONLY_HIGH,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_ONLY_HIGH,
}


def output_json_schema(model: type[BaseModel]) -> dict[str, Any]:
    """JSON schema for ``model`` with nullable ``anyOf`` wrappers and defaults removed.

    Optional fields are expressed by leaving them out of ``required``, which
    every tool-calling provider understands.
    """
    schema = copy.deepcopy(model.model_json_schema())
    for name, prop in schema.get("properties", {}).items():
        prop.pop("default", None)
        variants = prop.get("anyOf")
        if not variants:
            continue
        non_null = [v for v in variants if v.get("type") != "null"]
        if len(non_null) == 1:
            rest = {k: v for k, v in prop.items() if k != "anyOf"}
            schema["properties"][name] = {**non_null[0], **rest}
    return schema


def _tool_calls_in(messages) -> list[str]:
    names = []
    for msg in messages:
        if isinstance(msg, AIMessage) and msg.tool_calls:
            names.extend(tc["name"] for tc in msg.tool_calls)
    return names


class CompletionClient:
    def __init__(self, settings: Settings, model=None):
        self.settings = settings
        self._model = model
        self._start_error: Optional[str] = None

    @property
    def started(self) -> bool:
        return self._model is not None

    def _model_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.settings.model.startswith("google_genai:"):
            kwargs["safety_settings"] = SAFETY_SETTINGS
            if self.settings.api_key:
                kwargs["google_api_key"] = self.settings.api_key
        return kwargs

    async def start(self) -> "CompletionClient":
        if self._model is not None:
            return self
        try:
            self._model = init_chat_model(self.settings.model, **self._model_kwargs())
        except Exception as e:
            # Keep serving; every call will report the configuration problem.
            self._start_error = f"{type(e).__name__}: {e}"
            logger.error("Could not initialise chat model %s: %s", self.settings.model, self._start_error)
            return self
        self._start_error = None
        logger.info("Completion client started (model=%s)", self.settings.model)
        return self

    async def close(self) -> None:
        self._model = None
        logger.info("Completion client closed")

    async def __aenter__(self) -> "CompletionClient":
        return await self.start()

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def complete(
        self,
        *,
        system_prompt: str,
        user_message: str,
        output_schema: type[BaseModel],
        tools: Sequence = (),
    ) -> Optional[dict[str, Any]]:
        """Run one completion and return the raw structured response, or ``None``.

        Raises:
            CompletionServiceError: the model could not be reached or failed.
        """
        if self._model is None:
            reason = self._start_error or "completion client is not started"
            raise CompletionServiceError(f"Completion service is not available ({reason})")

        agent = create_agent(
            model=self._model,
            tools=list(tools),
            system_prompt=system_prompt,
            middleware=[retry_model],
            response_format=ToolStrategy(output_json_schema(output_schema)),
        )

        logger.info("Requesting %s from %s (%d tool(s) offered)", output_schema.__name__, self.settings.model, len(tools))
        try:
            result = await agent.ainvoke({"messages": [{"role": "user", "content": user_message}]})
        except Exception as e:
            logger.error("Completion request for %s failed: %s: %s", output_schema.__name__, type(e).__name__, e)
            raise CompletionServiceError(f"{type(e).__name__}: {e}") from e

        called = _tool_calls_in(result.get("messages", []))
        if called:
            logger.debug("Model called tools: %s", called)

        structured = result.get("structured_response")
        if structured is None:
            logger.warning("Model returned no structured %s", output_schema.__name__)
        return structured
