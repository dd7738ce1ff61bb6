"""
JSON serialization helpers.

The stdlib ``json`` module offers no per-object hook, so containers need
an encoder (or a ``default=`` callable) to serialize. Both emit the
redaction message.
"""

from __future__ import annotations

import json
from typing import Any

from .container import Redacted


def json_default(obj: Any) -> Any:
    """``default=`` hook for ``json.dumps``.

    Raises:
        TypeError: For objects that are not containers, as ``json`` expects.
    """
    if isinstance(obj, Redacted):
        return obj.to_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class RedactedJSONEncoder(json.JSONEncoder):
    """JSON encoder that renders ``Redacted`` values as the redaction message."""

    def default(self, o: Any) -> Any:
        return json_default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """``json.dumps`` with ``RedactedJSONEncoder`` preselected."""
    kwargs.setdefault("cls", RedactedJSONEncoder)
    return json.dumps(obj, **kwargs)
