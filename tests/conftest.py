"""
Pytest configuration and shared fixtures.

Channels write to a MemorySink here so tests can assert on the exact
lines a notification produces instead of capturing the console.
"""

import pytest

from order_notifier import MemorySink, NotificationFactory, NotificationManager


@pytest.fixture
def memory_sink() -> MemorySink:
    """Provide an empty in-memory sink."""
    return MemorySink()


@pytest.fixture
def factory(memory_sink) -> NotificationFactory:
    """Provide a factory with the built-in channels writing to `memory_sink`."""
    return NotificationFactory(sink=memory_sink)


@pytest.fixture
def manager(factory) -> NotificationManager:
    """Provide a manager wired to the in-memory factory."""
    return NotificationManager(factory)


@pytest.fixture
def channels_yaml(tmp_path):
    """Write a YAML channel file and return its path."""
    def _write(content: str):
        path = tmp_path / "channels.yml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


def pytest_configure(config):
    """
    Register custom pytest markers.

    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only end-to-end CLI tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (runs the CLI end to end)"
    )
