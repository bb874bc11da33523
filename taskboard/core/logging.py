"""Logging and observability configuration using Pydantic Logfire.

All modules use Python's standard logging library (logging.getLogger(__name__));
Logfire adds spans around store operations and ships records when a token is set.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})

Structured logging utilities:
    log_with_user_context(logger, "info", "Created task", user_id="user1", task_id="task_1")
"""

import logging

import logfire

from taskboard.core.config import Settings, constants, settings


def configure_logfire(app_settings: Settings | None = None) -> None:
    """Configure Pydantic Logfire with the token from the environment.

    Nothing leaves the process unless a token is configured.
    """
    app_settings = app_settings or settings
    logfire.configure(
        token=app_settings.logfire_token,
        service_name=constants.SERVICE_NAME,
        service_version=constants.SERVICE_VERSION,
        environment=app_settings.environment,
        send_to_logfire="if-token-present",
        console=False,
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def span(name: str, **attributes: object) -> logfire.LogfireSpan:
    """Create a custom span for store and service functions.

    Usage:
        with span("task_store.create", user_id="user1"):
            ...
    """
    return logfire.span(name, **attributes)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Emit a record whose keyword fields land on the LogRecord as attributes.

    Logfire picks the attributes up as span-searchable fields, so prefer
    task_id, offer_id or question_id over formatting them into the message.

    Usage:
        log_with_context(logger, "warning", "Dropped offer", task_id="task_1", policy="ignore")
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)


def log_with_user_context(
    logger: logging.Logger,
    level: str,
    message: str,
    user_id: str | None = None,
    **extra: object,
) -> None:
    """Like log_with_context, tagging the record with the identity behind a store mutation.

    user_id is left off the record entirely when it is not known.

    Usage:
        log_with_user_context(logger, "info", "Received offer", user_id=offer.user_id, offer_id=offer.id)
    """
    context = {"user_id": user_id, **extra} if user_id else extra
    log_with_context(logger, level, message, **context)
