"""ChatOpenAI client management."""

from __future__ import annotations

from functools import lru_cache

from langchain_openai import ChatOpenAI


@lru_cache(maxsize=32)
def get_chat_model(
    model: str,
    temperature: float,
    timeout_seconds: int,
    api_key: str,
) -> ChatOpenAI:
    """Return a cached ChatOpenAI client for the given parameters.

    The client never retries; a failed call is handled by the caller's fallback.
    """
    return ChatOpenAI(
        model=model,
        temperature=temperature,
        api_key=api_key,
        request_timeout=timeout_seconds,
        max_retries=0,
    )


def clear_chat_model_cache() -> None:
    """Drop cached clients (tests, credential rotation)."""
    get_chat_model.cache_clear()
