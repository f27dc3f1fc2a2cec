"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console


class FakeClock:
    """Monotonic clock that advances by a fixed step on every read."""

    def __init__(self, step: float = 0.0) -> None:
        self.t = 0.0
        self.step = step

    def __call__(self) -> float:
        value = self.t
        self.t += self.step
        return value


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """A plain-text console writing into console_buffer."""
    return Console(file=console_buffer, width=120, force_terminal=False, color_system=None)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def clock_factory() -> type[FakeClock]:
    return FakeClock
