"""Photo picking for task drafts."""

import logging
from typing import Protocol


logger = logging.getLogger(__name__)

PHOTO_COMING_SOON_MESSAGE = "Adding photos will be available soon"


class MediaPicker(Protocol):
    """Lets the user choose a photo to attach to a task."""

    def pick_photo(self) -> str | None:
        """Return a photo reference (URI), or None if nothing was picked."""
        ...


class StubMediaPicker:
    """Placeholder picker: never returns a photo, only records a notice for the user."""

    def __init__(self) -> None:
        self.notices: list[str] = []

    def pick_photo(self) -> str | None:
        self.notices.append(PHOTO_COMING_SOON_MESSAGE)
        logger.info("Photo picking requested but not available")
        return None
