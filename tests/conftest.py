"""Pytest configuration and shared fixtures for grand tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start each test from default, environment-free configuration."""
    import grand._config as config_module

    monkeypatch.delenv('GRAND_ENTROPY', raising=False)
    monkeypatch.delenv('GRAND_LOG_LEVEL', raising=False)
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None]:
    """Undo any configure_logging() a test performs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def entropy_calls(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Replace entropy reads with a counter returning 12345, 12346, ..."""
    import grand.grand as grand_module

    calls: list[int] = []

    def fake_draw_entropy(source: object = None) -> int:
        value = 12345 + len(calls)
        calls.append(value)
        return value

    monkeypatch.setattr(grand_module, 'draw_entropy', fake_draw_entropy)
    return calls


@pytest.fixture
def no_entropy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every entropy read fail."""
    import grand.grand as grand_module
    from grand.errors import EntropyUnavailableError

    def failing_draw_entropy(source: object = None) -> int:
        raise EntropyUnavailableError('system', 'no entropy in this environment')

    monkeypatch.setattr(grand_module, 'draw_entropy', failing_draw_entropy)
