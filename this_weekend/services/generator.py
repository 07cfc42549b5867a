"""Itinerary text generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from time import perf_counter
from typing import Any

from this_weekend.core.config import Settings, get_settings
from this_weekend.core.llm import get_chat_model
from this_weekend.core.logger import get_logger
from this_weekend.core.timeout_policy import get_timeout_policy
from this_weekend.services.prompt_builder import GenerationRequest

logger = get_logger(__name__)


class ItineraryGenerator(ABC):
    """Interface of the external text-completion collaborator."""

    @abstractmethod
    async def complete(self, request: GenerationRequest) -> str:
        """Send the request and return the raw reply text.

        Args:
            request: Prompt, rules, schema and sampling settings.

        Returns:
            Unstructured reply text, expected to be a single JSON object.

        Raises:
            Exception: Any transport or API failure. Callers treat every
                exception as an unavailable upstream.
        """


def _content_text(content: Any) -> str:
    """Flatten a chat message content (plain string or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return str(content or "")


class ChatOpenAIGenerator(ItineraryGenerator):
    """Generator backed by the OpenAI chat completion API through LangChain."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings

    async def complete(self, request: GenerationRequest) -> str:
        settings = self._settings or get_settings()
        timeout_policy = get_timeout_policy(settings)
        model_name = settings.LLM_MODEL_NAME.strip()
        client = get_chat_model(
            model_name,
            request.temperature,
            timeout_policy.llm_timeout_seconds,
            settings.OPENAI_API_KEY,
        )

        started = perf_counter()
        try:
            response = await client.ainvoke(request.to_messages())
        except Exception as exc:
            logger.warning(
                "LLM call failed",
                extra={"selected_model": model_name, "latency_ms": (perf_counter() - started) * 1000},
                exc_info=exc,
            )
            raise

        logger.info(
            "LLM call succeeded",
            extra={"selected_model": model_name, "latency_ms": (perf_counter() - started) * 1000},
        )
        return _content_text(response.content)
