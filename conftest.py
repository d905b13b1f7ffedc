"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- A clean TERMGRID_* environment per test, with colour output off
- Recording components for observing how layouts size their children
"""

from __future__ import annotations

import os
from typing import Generator

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Recording Components
# =============================================================================


class RecordingComponent:
    """Resizable component that records every resize it receives.

    Copies made by ``resize`` share the call log of the original. Once
    sized it renders a solid block of its first character, so the cell it
    was given is visible in the output.
    """

    def __init__(
        self,
        content: str,
        resize_calls: list[tuple[int, int]] | None = None,
        width: int = 0,
        height: int = 0,
    ):
        self.content = content
        self.width = width
        self.height = height
        self.resize_calls = [] if resize_calls is None else resize_calls
        self.render_calls = 0

    def resize(self, width: int, height: int) -> RecordingComponent:
        self.resize_calls.append((width, height))
        return RecordingComponent(self.content, self.resize_calls, width, height)

    def render(self) -> str:
        self.render_calls += 1
        if self.width > 0 and self.height > 0:
            fill = (self.content or " ")[0]
            return "\n".join(fill * self.width for _ in range(self.height))
        return self.content


class FixedComponent:
    """Render-only component that counts how often it is rendered."""

    def __init__(self, content: str):
        self.content = content
        self.render_calls = 0

    def render(self) -> str:
        self.render_calls += 1
        return self.content


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate each test from TERMGRID_* settings and disable colour.

    Tests that need colour set TERMGRID_COLOR themselves.
    """
    for name in list(os.environ):
        if name.startswith("TERMGRID_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERMGRID_COLOR", "0")
    yield


@pytest.fixture
def sized_recorder() -> type[RecordingComponent]:
    """Factory for resizable recording components."""
    return RecordingComponent


@pytest.fixture
def fixed_recorder() -> type[FixedComponent]:
    """Factory for render-only counting components."""
    return FixedComponent
