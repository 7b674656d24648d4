"""Module logger with structured context support.

Usage:
    from poolgauge.core.logging import logger

    log = logger.with_context(pool="primary")
    log.debug("Sampler started")
"""

import logging
from typing import Any

_LOGGER_NAME = "poolgauge"


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter that renders bound context fields as a message prefix."""

    def __init__(self, base: logging.Logger, context: dict[str, Any] | None = None) -> None:
        super().__init__(base, dict(context or {}))

    def with_context(self, **fields: Any) -> "ContextualLogger":
        """Return a child logger with *fields* merged into the current context."""
        return ContextualLogger(self.logger, {**self.extra, **fields})

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        if not self.extra:
            return msg, kwargs
        prefix = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"[{prefix}] {msg}", kwargs


logger = ContextualLogger(logging.getLogger(_LOGGER_NAME))
