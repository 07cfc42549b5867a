"""Logging setup layered on uvicorn's default configuration."""

from __future__ import annotations

import copy
import logging.config
import os
from typing import Any

from uvicorn.config import LOGGING_CONFIG as UVICORN_LOGGING_CONFIG

from this_weekend.core.logger import DATE_FORMAT, LOG_FORMAT

APP_LOGGER_NAME = "this_weekend"


def _resolve_log_level(level: str | None = None) -> str:
    if level:
        return level.upper()
    return os.getenv("LOG_LEVEL", "INFO").upper()


def build_logging_config(level: str | None = None) -> dict[str, Any]:
    """Build a dictConfig mapping.

    uvicorn's loggers keep their own handlers. Everything else reaches the
    root handler, which uses `PlanContextFormatter` so generator latency and
    model fields show up in the log line.
    """
    log_level = _resolve_log_level(level)
    config = copy.deepcopy(UVICORN_LOGGING_CONFIG)

    config["formatters"]["plan"] = {
        "()": "this_weekend.core.logger.PlanContextFormatter",
        "fmt": LOG_FORMAT,
        "datefmt": DATE_FORMAT,
    }
    config["handlers"]["plan"] = {
        "class": "logging.StreamHandler",
        "formatter": "plan",
        "stream": "ext://sys.stdout",
    }

    config["root"] = {"handlers": ["plan"], "level": log_level}
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        config["loggers"][name]["level"] = log_level
    config["loggers"][APP_LOGGER_NAME] = {"level": log_level, "propagate": True}

    return config


def configure_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
