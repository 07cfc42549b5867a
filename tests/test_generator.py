"""ChatOpenAI generator tests."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from this_weekend.core.config import Settings
from this_weekend.core.llm import clear_chat_model_cache, get_chat_model
from this_weekend.schemas.weekend import WeekendForm
from this_weekend.services.generator import ChatOpenAIGenerator
from this_weekend.services.prompt_builder import build_generation_request


def _settings(**overrides) -> Settings:
    values = {"OPENAI_API_KEY": "test-key", "LLM_MODEL_NAME": " gpt-4o-mini ", "LLM_TIMEOUT_SECONDS": 30}
    values.update(overrides)
    return Settings(**values)


@patch("this_weekend.services.generator.get_chat_model")
def test_complete_sends_messages_and_returns_text(mock_get_chat_model: MagicMock) -> None:
    client = MagicMock()
    client.ainvoke = AsyncMock(return_value=MagicMock(content='{"city": "Lisbon"}'))
    mock_get_chat_model.return_value = client
    request = build_generation_request(WeekendForm(city="Lisbon"), temperature=0.4)

    text = asyncio.run(ChatOpenAIGenerator(_settings()).complete(request))

    assert text == '{"city": "Lisbon"}'
    mock_get_chat_model.assert_called_once_with("gpt-4o-mini", 0.4, 30, "test-key")
    sent_messages = client.ainvoke.call_args.args[0]
    assert len(sent_messages) == 2


@patch("this_weekend.services.generator.get_chat_model")
def test_complete_joins_content_parts(mock_get_chat_model: MagicMock) -> None:
    content = [{"type": "text", "text": '{"city": '}, {"type": "text", "text": '"Lisbon"}'}]
    client = MagicMock()
    client.ainvoke = AsyncMock(return_value=MagicMock(content=content))
    mock_get_chat_model.return_value = client
    request = build_generation_request(WeekendForm(city="Lisbon"))

    text = asyncio.run(ChatOpenAIGenerator(_settings()).complete(request))

    assert text == '{"city": "Lisbon"}'


@patch("this_weekend.services.generator.get_chat_model")
def test_complete_propagates_client_errors(mock_get_chat_model: MagicMock) -> None:
    client = MagicMock()
    client.ainvoke = AsyncMock(side_effect=RuntimeError("503 from upstream"))
    mock_get_chat_model.return_value = client
    request = build_generation_request(WeekendForm(city="Lisbon"))

    with pytest.raises(RuntimeError):
        asyncio.run(ChatOpenAIGenerator(_settings()).complete(request))

    assert client.ainvoke.await_count == 1


def test_chat_model_is_cached_without_retries() -> None:
    clear_chat_model_cache()

    first = get_chat_model("gpt-4o-mini", 0.7, 30, "test-key")
    second = get_chat_model("gpt-4o-mini", 0.7, 30, "test-key")

    assert first is second
    assert first.max_retries == 0
    clear_chat_model_cache()
