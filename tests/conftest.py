"""Shared test fixtures."""

import io
import sys
from pathlib import Path

import pytest

# Add project root to path so tests run without an install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DEFAULT_NOW = 1700000000


class MockContext:
    """Mock Context for testing checks without real files or clock."""

    def __init__(
        self,
        file_contents: dict[str, str] | None = None,
        now: int = DEFAULT_NOW,
    ):
        self.file_contents = file_contents or {}
        self._now = now
        self.opened: list[io.StringIO] = []

    def now(self) -> int:
        """Return the mocked clock."""
        return self._now

    def open_file(self, path: str) -> io.StringIO:
        """Return mocked file content as an open text stream."""
        if path not in self.file_contents:
            raise FileNotFoundError(f"No mock content for: {path}")
        handle = io.StringIO(self.file_contents[path])
        self.opened.append(handle)
        return handle


def no_config(key: str) -> None:
    """Config lookup that never finds a value."""
    return None


@pytest.fixture
def mock_context():
    """Factory fixture for creating MockContext instances."""
    def _create(**kwargs) -> MockContext:
        return MockContext(**kwargs)
    return _create


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return FIXTURES_DIR


def load_fixture(category: str, name: str) -> str:
    """Load a fixture file by category and name."""
    fixture_path = FIXTURES_DIR / category / name
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text()
