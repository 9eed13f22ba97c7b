"""Pytest fixtures for quill tests.

This module provides:
- FakeClock: Monotonic clock advanced by hand
- make_quill: Factory for pipelines writing to an in-memory sink
- Environment, structlog and root logger isolation between tests
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import pytest
import structlog

from quill import pipeline as pipeline_module
from quill.config import QuillConfig
from quill.levels import TimeMode
from quill.logging import QuillHandler
from quill.pipeline import Quill

FIXED_NOW = datetime(2026, 1, 2, 13, 4, 5)


@dataclass
class FakeClock:
    """Monotonic clock that only moves when ``advance`` is called."""

    seconds: float = 0.0

    def __call__(self) -> float:
        return self.seconds

    def advance(self, seconds: float) -> None:
        self.seconds += seconds


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep QUILL_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("QUILL_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Drop handlers configure_logging attached to the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, QuillHandler):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def reset_default_pipeline(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(pipeline_module, "_default", None)


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_quill(sink: io.StringIO, clock: FakeClock) -> Callable[..., Quill]:
    """Build a pipeline with a fixed wall clock and thread name.

    Keyword arguments become ``QuillConfig`` fields; timestamps are off unless
    ``time_mode`` is given.
    """

    def _make(**overrides: Any) -> Quill:
        overrides.setdefault("time_mode", TimeMode.NONE)
        return Quill(
            QuillConfig(**overrides),
            sink=sink,
            clock=clock,
            now=lambda: FIXED_NOW,
            thread_name=lambda: "main",
        )

    return _make
