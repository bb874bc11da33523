"""Session-unique record ID generation."""

import secrets
import time

from taskboard.core.config import constants


def generate_id(prefix: str) -> str:
    """Return an ID of the form ``<prefix>_<epoch millis>_<random base36 suffix>``.

    IDs are assumed, not proven, unique within a session.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(constants.ID_ALPHABET) for _ in range(constants.ID_SUFFIX_LENGTH))
    return f"{prefix}_{millis}_{suffix}"
