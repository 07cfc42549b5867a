"""Standard logger factory.

Every module gets the same log line layout, whether or not
`configure_logging` has run (tests import modules directly). Generator
calls pass the model name and latency through `extra`; the plan formatter
appends those fields to the line.
"""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# `extra` keys rendered after the message, in this order.
PLAN_CONTEXT_FIELDS = ("selected_model", "latency_ms", "plan_source")


class PlanContextFormatter(logging.Formatter):
    """Formatter that appends known plan context fields as `key=value` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = []
        for field in PLAN_CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is None:
                continue
            if isinstance(value, float):
                value = f"{value:.1f}"
            context.append(f"{field}={value}")
        if not context:
            return line
        return f"{line} | {' '.join(context)}"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        The logger. A stdout handler is attached only when the logger has
        none and the root logger is not configured either.
    """
    logger = logging.getLogger(name)

    if not logger.handlers and not logging.getLogger().handlers:
        logger.setLevel(logging.INFO)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        handler.setFormatter(PlanContextFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
