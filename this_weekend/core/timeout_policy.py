"""Timeout policy shared by the HTTP layer and the LLM client."""

from __future__ import annotations

from dataclasses import dataclass

from this_weekend.core.config import Settings, get_settings

_MIN_TIMEOUT_SECONDS = 1


def _normalize_timeout(value: int | float | None, default: int, *, upper_bound: int | None = None) -> int:
    """Normalize a timeout value to whole seconds."""
    try:
        seconds = int(value) if value is not None else int(default)
    except (TypeError, ValueError):
        seconds = int(default)

    seconds = max(_MIN_TIMEOUT_SECONDS, seconds)
    if upper_bound is not None:
        seconds = min(seconds, upper_bound)
    return seconds


@dataclass(frozen=True, slots=True)
class TimeoutPolicy:
    """Application timeouts, in seconds."""

    request_timeout_seconds: int
    llm_timeout_seconds: int


def build_timeout_policy(settings: Settings) -> TimeoutPolicy:
    """Derive a consistent policy; the LLM timeout never exceeds the request timeout."""
    request_timeout = _normalize_timeout(settings.REQUEST_TIMEOUT_SECONDS, default=60)
    llm_timeout = _normalize_timeout(settings.LLM_TIMEOUT_SECONDS, default=45, upper_bound=request_timeout)

    return TimeoutPolicy(
        request_timeout_seconds=request_timeout,
        llm_timeout_seconds=llm_timeout,
    )


def get_timeout_policy(settings: Settings | None = None) -> TimeoutPolicy:
    """Return the policy for the given (or current) settings."""
    resolved_settings = settings or get_settings()
    return build_timeout_policy(resolved_settings)
