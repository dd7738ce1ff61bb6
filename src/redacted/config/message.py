"""
Redaction message configuration.

The redaction message is the placeholder every ``Redacted`` container
renders instead of its payload. It is resolved once from the environment
and stays fixed for the life of the process.

Environment Variables:
    REDACTED_MESSAGE: Custom placeholder text (default: "<redacted>")
        Example: "[REDACTED]"
"""

from __future__ import annotations

import logging
import os
from threading import RLock
from typing import ClassVar

# Default placeholder when no override is set
DEFAULT_REDACTED_MESSAGE = "<redacted>"

# Environment variable name
ENV_REDACTED_MESSAGE = "REDACTED_MESSAGE"

logger = logging.getLogger(__name__)


class RedactedMessageConfig:
    """Process-wide redaction message, read once from the environment."""

    _instance: ClassVar[RedactedMessageConfig | None] = None
    _instance_lock: ClassVar[RLock] = RLock()

    def __init__(self) -> None:
        self._message: str = DEFAULT_REDACTED_MESSAGE
        self._overridden: bool = False
        self._load_from_env()

    @classmethod
    def get_instance(cls) -> RedactedMessageConfig:
        """Get or create the singleton instance."""
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                instance = cls._instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        with cls._instance_lock:
            cls._instance = None

    def _load_from_env(self) -> None:
        """Load the message from the environment.

        An empty value is still an override; only an unset variable falls
        back to the default.
        """
        value = os.environ.get(ENV_REDACTED_MESSAGE)
        if value is None:
            return
        logger.debug("Using redaction message override from %s", ENV_REDACTED_MESSAGE)
        self._message = value
        self._overridden = True

    @property
    def message(self) -> str:
        """The resolved redaction message."""
        return self._message

    @property
    def is_overridden(self) -> bool:
        """True if the message came from the environment."""
        return self._overridden


def get_redacted_message() -> str:
    """Get the current redaction message.

    Convenience function that uses the singleton RedactedMessageConfig.

    Returns:
        The placeholder text rendered by every container.
    """
    return RedactedMessageConfig.get_instance().message


# Resolved at import, i.e. at process start for any program importing the package
REDACTED_MESSAGE = get_redacted_message()
