"""
SAHARA Logging Configuration

Structured logging with structlog:
- Correlation ID tracking for request tracing
- Redaction of user-authored text and secrets
- JSON output outside development, console output in development

PRIVACY: Message and journal text must never reach the logs.
Log categories, risk levels and counts instead.
"""

import logging
import sys
from typing import Any

import structlog

from sahara.config.settings import Settings


# Keys whose values are replaced before rendering
REDACTED_KEYS: frozenset[str] = frozenset({
    "text",
    "message",
    "content",
    "journal",
    "password",
    "token",
    "secret",
    "api_key",
    "authorization",
})

REDACTED = "[REDACTED]"


def _redact_user_text(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Redact user-authored text and secrets from log entries.

    Matching is on exact lower-cased key names so that fields such as
    ``text_length`` stay visible. The ``event`` key is never redacted.
    """
    def redact(key: str, value: Any) -> Any:
        if key != "event" and key.lower() in REDACTED_KEYS:
            return REDACTED
        if isinstance(value, dict):
            return {k: redact(k, v) for k, v in value.items()}
        return value

    return {key: redact(key, value) for key, value in event_dict.items()}


def _add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add service-level context to all log entries."""
    event_dict["service"] = "sahara-sentiment"
    event_dict["version"] = "0.1.0"
    return event_dict


def get_processors(is_development: bool) -> list[Any]:
    """
    Get structlog processors based on environment.

    Args:
        is_development: Whether running in development mode

    Returns:
        List of log processors
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _redact_user_text,
        _add_service_context,
    ]

    if is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    return processors


def configure_logging(settings: Settings) -> None:
    """
    Configure application logging.

    Should be called once during application startup.

    Args:
        settings: Application settings
    """
    is_development = settings.env == "development"
    log_level = getattr(logging, settings.log_level.upper())

    structlog.configure(
        processors=get_processors(is_development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Bind correlation ID to the current request context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_context() -> None:
    """Clear all context variables (call at end of request)."""
    structlog.contextvars.clear_contextvars()
