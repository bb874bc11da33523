"""taskboard - session bootstrap."""

import logging

from taskboard.core.config import Settings, settings
from taskboard.core.logging import configure_logfire
from taskboard.services.identity_service import IdentityProvider, StaticIdentityProvider
from taskboard.services.task_store import TaskStore


logger = logging.getLogger(__name__)


def build_store(
    app_settings: Settings | None = None,
    *,
    identity_provider: IdentityProvider | None = None,
    configure_observability: bool = True,
) -> TaskStore:
    """Create the session's task store for the current identity.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded settings)
        identity_provider: Source of the acting user (defaults to the configured static identity)
        configure_observability: Whether to configure Logfire first

    Returns:
        An empty TaskStore bound to the current identity
    """
    app_settings = app_settings or settings
    if configure_observability:
        configure_logfire(app_settings)

    identity_provider = identity_provider or StaticIdentityProvider.from_settings(app_settings)
    identity = identity_provider.current()

    store = TaskStore(identity, missing_parent_policy=app_settings.missing_parent_policy)
    logger.info(
        "Task store ready",
        extra={"user_id": identity.user_id, "missing_parent_policy": str(app_settings.missing_parent_policy)},
    )
    return store
