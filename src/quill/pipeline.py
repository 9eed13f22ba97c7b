"""Leveled print pipeline.

``Quill`` filters messages by level, builds the thread/type/timestamp prefix,
renders the line through the style engine and writes it to its sink in one
locked step, so concurrent emitters never interleave.

Usage:
    from quill import Quill, QuillConfig, TimeMode

    q = Quill(QuillConfig(show_type=True, time_mode=TimeMode.NONE))
    q.info("boot")
    q.warn("Deprecated configuration detected.")
"""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

import structlog

from quill.config import QuillConfig
from quill.errors import InterruptedWaitError
from quill.levels import GlyphSet, Level, Severity, TimeMode
from quill.style import Style, lock, render

log = structlog.get_logger()


class Sink(Protocol):
    """Anything text can be written to."""

    def write(self, text: str, /) -> object: ...

    def flush(self) -> None: ...


def _current_thread_name() -> str:
    return threading.current_thread().name


class Quill:
    """A configured pipeline writing styled, prefixed lines to one sink.

    Args:
        config: Settings for this pipeline (copied; defaults read the environment)
        sink: Output stream, ``sys.stdout`` when omitted
        clock: Monotonic seconds, used for elapsed timestamps
        now: Wall-clock source, used for absolute timestamps
        thread_name: Returns the calling thread's display name
    """

    def __init__(
        self,
        config: QuillConfig | None = None,
        *,
        sink: Sink | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
        thread_name: Callable[[], str] = _current_thread_name,
    ) -> None:
        self.config = config.model_copy() if config is not None else QuillConfig()
        self.sink: Sink = sink if sink is not None else sys.stdout
        self._clock = clock
        self._now = now
        self._thread_name = thread_name
        self._started = clock()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def level(self) -> Level:
        return self.config.level

    def set_level(self, level: Level | str | None) -> None:
        """Set the threshold; ``None`` shows everything again."""
        self.config.level = level if level is not None else Level.LOW

    @property
    def time_mode(self) -> TimeMode:
        return self.config.time_mode

    def set_time_mode(self, mode: TimeMode | str | None) -> None:
        """Set the timestamp mode; ``None`` restores elapsed timestamps."""
        self.config.time_mode = mode if mode is not None else TimeMode.ELAPSED

    @property
    def time_format(self) -> str:
        return self.config.time_format

    def set_time_format(self, pattern: str | None) -> None:
        """Set the strftime pattern for absolute timestamps. Blank patterns are ignored."""
        if pattern and pattern.strip():
            self.config.time_format = pattern

    @property
    def show_type(self) -> bool:
        return self.config.show_type

    def set_show_type(self, value: bool) -> None:
        self.config.show_type = value

    @property
    def show_thread(self) -> bool:
        return self.config.show_thread

    def set_show_thread(self, value: bool) -> None:
        self.config.show_thread = value

    @property
    def glyphs(self) -> GlyphSet:
        return self.config.glyphs

    def set_glyphs(self, glyphs: GlyphSet | str) -> None:
        self.config.glyphs = glyphs

    # ------------------------------------------------------------------
    # Prefix helpers
    # ------------------------------------------------------------------

    def _timestamp(self) -> str:
        mode = self.config.time_mode
        if mode == TimeMode.ABSOLUTE:
            return f"[{self._now().strftime(self.config.time_format)}] "
        if mode == TimeMode.ELAPSED:
            elapsed = round((self._clock() - self._started) * 1000)
            minutes, rest = divmod(elapsed, 60_000)
            seconds, millis = divmod(rest, 1000)
            return f"[{minutes % 60:02d}:{seconds:02d}:{millis:03d}] "
        return ""

    def _thread(self) -> str:
        # Locked so the severity style never recolors the thread name
        return lock(f"[{self._thread_name()}] ")

    # ------------------------------------------------------------------
    # Unified output
    # ------------------------------------------------------------------

    def format_line(
        self,
        severity: Severity,
        message: str,
        show_type: bool | None = None,
    ) -> str | None:
        """Build the rendered line for ``message``, or ``None`` when filtered out.

        Args:
            severity: Message kind; picks the level, label, glyph and style
            message: Text to emit, may contain escapes and locked segments
            show_type: Overrides the configured label/glyph choice when not None
        """
        config = self.config
        if severity.level.priority < config.level.priority:
            return None

        show_label = config.show_type if show_type is None else show_type

        prefix = self._thread() if config.show_thread else ""
        prefix += severity.label() if show_label else severity.glyph(config.glyphs)
        prefix += self._timestamp()

        return render(f"{prefix}{message}", severity.style)

    def emit(self, severity: Severity, message: str, show_type: bool | None = None) -> None:
        """Write one line for ``message`` unless it is below the threshold."""
        with self._lock:
            line = self.format_line(severity, message, show_type)
            if line is None:
                return
            self._write(f"{line}\n")

    def _write(self, text: str) -> None:
        self.sink.write(text)
        self.sink.flush()

    def write_line(self, line: str) -> None:
        """Write an already rendered line and a terminator as one locked write."""
        with self._lock:
            self._write(f"{line}\n")

    def print(self, message: str, *styles: Style) -> None:
        """Render ``message`` with ``styles`` and write it without a newline or prefix."""
        with self._lock:
            self._write(render(message, *styles) or "")

    def println(self, message: str = "", *styles: Style) -> None:
        """Like ``print`` but terminates the line."""
        with self._lock:
            self._write(f"{render(message, *styles) or ''}\n")

    # ------------------------------------------------------------------
    # Level shortcuts
    # ------------------------------------------------------------------

    def info(self, message: str, show_type: bool | None = None) -> None:
        self.emit(Severity.INFO, message, show_type)

    def log(self, message: str, show_type: bool | None = None) -> None:
        self.emit(Severity.LOG, message, show_type)

    def warn(self, message: str, show_type: bool | None = None) -> None:
        self.emit(Severity.WARN, message, show_type)

    def error(self, message: str, show_type: bool | None = None) -> None:
        self.emit(Severity.ERROR, message, show_type)

    def success(self, message: str, show_type: bool | None = None) -> None:
        self.emit(Severity.SUCCESS, message, show_type)

    # ------------------------------------------------------------------
    # Sleep
    # ------------------------------------------------------------------

    def sleep(self, seconds: float, cancel: threading.Event | None = None) -> None:
        """Block for ``seconds`` and then report it at info level.

        Args:
            seconds: How long to block
            cancel: Setting this event ends the wait early

        Raises:
            InterruptedWaitError: ``cancel`` was set before the time elapsed
        """
        if cancel is None:
            time.sleep(seconds)
        elif cancel.wait(seconds):
            log.debug("sleep_interrupted", seconds=seconds)
            raise InterruptedWaitError(seconds)
        self.info(f"Slept for: {seconds}s.")


# Process-wide default pipeline, created on first use
_default: Quill | None = None
_default_lock = threading.Lock()


def get_pipeline() -> Quill:
    """Return the shared pipeline built from ``QUILL_*`` environment settings."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Quill()
    return _default
