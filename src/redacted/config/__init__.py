"""Configuration module for redacted."""

from redacted.config.message import (
    DEFAULT_REDACTED_MESSAGE,
    ENV_REDACTED_MESSAGE,
    REDACTED_MESSAGE,
    RedactedMessageConfig,
    get_redacted_message,
)

__all__ = [
    "DEFAULT_REDACTED_MESSAGE",
    "ENV_REDACTED_MESSAGE",
    "REDACTED_MESSAGE",
    "RedactedMessageConfig",
    "get_redacted_message",
]
