"""Pytest configuration and shared fixtures for redacted tests."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from payloads import EXAMPLES

from redacted import Redacted
from redacted.config.message import ENV_REDACTED_MESSAGE, RedactedMessageConfig

TESTS_DIR = Path(__file__).parent
SRC_DIR = TESTS_DIR.parent / "src"


@pytest.fixture(autouse=True)
def default_message(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against the default message, resolved fresh."""
    monkeypatch.delenv(ENV_REDACTED_MESSAGE, raising=False)
    RedactedMessageConfig.reset()
    yield
    RedactedMessageConfig.reset()


@pytest.fixture
def set_message(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Override the redaction message as if it had been set at startup."""

    def _set(message: str) -> None:
        monkeypatch.setenv(ENV_REDACTED_MESSAGE, message)
        RedactedMessageConfig.reset()

    return _set


@pytest.fixture
def examples() -> list[object]:
    """Payloads of many different shapes."""
    return EXAMPLES


@pytest.fixture
def wrapped_examples() -> list[Redacted[object]]:
    """Every example payload, wrapped."""
    return [Redacted.wrap(example) for example in EXAMPLES]


@pytest.fixture
def run_python() -> Callable[..., subprocess.CompletedProcess[str]]:
    """Run a Python snippet or script in a fresh interpreter."""

    def _run(
        *args: str, env: dict[str, str] | None = None
    ) -> subprocess.CompletedProcess[str]:
        child_env = {
            key: value for key, value in os.environ.items() if key != ENV_REDACTED_MESSAGE
        }
        child_env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(SRC_DIR), str(TESTS_DIR), child_env.get("PYTHONPATH")])
        )
        child_env.update(env or {})
        return subprocess.run(
            [sys.executable, *args],
            capture_output=True,
            text=True,
            env=child_env,
            timeout=60,
            check=False,
        )

    return _run
