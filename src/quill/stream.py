"""Thread-safe, lock-aware text stream wrapper."""

from __future__ import annotations

import threading

from quill.pipeline import Sink
from quill.style import render


class LockedStream:
    """Pass every write through ``render`` with no styles, one writer at a time.

    Escape sequences and locked segments reach the wrapped stream untouched;
    plain runs are closed with a reset so styling never leaks past a write.

    Example:
        out = LockedStream(sys.stdout)
        out.println("styled and synchronized")
    """

    def __init__(self, stream: Sink) -> None:
        self.stream = stream
        self._lock = threading.Lock()

    def write(self, text: str) -> int:
        rendered = render(text) or ""
        with self._lock:
            self.stream.write(rendered)
        return len(text) if text else 0

    def print(self, text: str) -> None:
        with self._lock:
            self.stream.write(render(text) or "")
            self.stream.flush()

    def println(self, text: str = "") -> None:
        with self._lock:
            self.stream.write(f"{render(text) or ''}\n")
            self.stream.flush()

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()
