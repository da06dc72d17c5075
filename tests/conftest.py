"""Shared test fixtures."""
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `clicker.*` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeEmitter:
    """Records every event instead of sending it to the OS."""

    def __init__(self, fail: bool = False) -> None:
        self.events: list = []
        self.fail = fail

    def emit(self, event) -> bool:
        self.events.append(event)
        return not self.fail


class LogCollector:
    """Callable log sink: collects (level, message) tuples."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str]] = []

    def __call__(self, level: str, message: str) -> None:
        self.entries.append((level, message))

    def levels(self) -> list[str]:
        return [level for level, _ in self.entries]


@pytest.fixture
def emitter() -> FakeEmitter:
    return FakeEmitter()


@pytest.fixture
def logs() -> LogCollector:
    return LogCollector()
