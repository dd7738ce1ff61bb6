"""redacted package."""

from .config.message import (
    DEFAULT_REDACTED_MESSAGE,
    ENV_REDACTED_MESSAGE,
    REDACTED_MESSAGE,
    RedactedMessageConfig,
    get_redacted_message,
)
from .container import Redacted, transform, unwrap, wrap
from .serialization import RedactedJSONEncoder, dumps, json_default

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_REDACTED_MESSAGE",
    "ENV_REDACTED_MESSAGE",
    "REDACTED_MESSAGE",
    "Redacted",
    "RedactedJSONEncoder",
    "RedactedMessageConfig",
    "dumps",
    "get_redacted_message",
    "json_default",
    "transform",
    "unwrap",
    "wrap",
]
