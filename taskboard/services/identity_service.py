"""Identity providers for the current session."""

from typing import Protocol

from taskboard.core.config import Settings, settings
from taskboard.domain.user import Identity


class IdentityProvider(Protocol):
    """Supplies the identity of the user acting in this session."""

    def current(self) -> Identity:
        """Return the current user's identity."""
        ...


class StaticIdentityProvider:
    """Always returns the same identity. Stands in for a real authentication backend."""

    def __init__(self, identity: Identity) -> None:
        self._identity = identity

    @classmethod
    def from_settings(cls, app_settings: Settings | None = None) -> "StaticIdentityProvider":
        app_settings = app_settings or settings
        return cls(Identity(user_id=app_settings.current_user_id, user_name=app_settings.current_user_name))

    def current(self) -> Identity:
        return self._identity
