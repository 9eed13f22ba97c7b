"""quill structlog formatters.

Routes structlog events through a ``Quill`` pipeline so they share its
threshold, prefixes and severity styles: [TYPE] timestamp message key=value...
"""

from __future__ import annotations

import sys
import traceback
from typing import TYPE_CHECKING, Any

import structlog

from quill import colors
from quill.levels import Severity
from quill.style import Style, lock, render

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger

    from quill.pipeline import Quill

# structlog method / level name → pipeline severity
METHOD_SEVERITIES: dict[str, Severity] = {
    "debug": Severity.LOG,
    "info": Severity.INFO,
    "warning": Severity.WARN,
    "warn": Severity.WARN,
    "error": Severity.ERROR,
    "exception": Severity.ERROR,
    "critical": Severity.ERROR,
    "fatal": Severity.ERROR,
    "success": Severity.SUCCESS,
}


class QuillRenderer:
    """Final structlog processor rendering events with a pipeline's presentation.

    Events the pipeline filters out are dropped. Key-value pairs are styled
    on their own and locked, so the severity color never overrides them.

    Example:
        [WARN]    [00:03:120] Cache miss key=users hit_rate=0.42
    """

    def __init__(
        self,
        pipeline: Quill,
        *,
        show_type: bool | None = None,
        max_exception_frames: int = 5,
    ) -> None:
        """Initialize the renderer.

        Args:
            pipeline: Pipeline whose config and styles format each event
            show_type: Overrides the pipeline's label/glyph choice when not None
            max_exception_frames: Max traceback frames to show
        """
        self.pipeline = pipeline
        self.show_type = show_type
        self.max_exception_frames = max_exception_frames

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> str:
        """Render a log event to a formatted string."""
        level = str(event_dict.pop("level", method_name)).lower()
        event = str(event_dict.pop("event", ""))
        # The pipeline stamps its own time
        event_dict.pop("timestamp", None)
        exc_info = event_dict.pop("exc_info", None)

        severity = METHOD_SEVERITIES.get(level, Severity.INFO)
        kv_pairs = self._format_kv_pairs(event_dict)
        message = f"{event} {lock(kv_pairs)}" if kv_pairs else event

        line = self.pipeline.format_line(severity, message, self.show_type)
        if line is None:
            raise structlog.DropEvent

        if exc_info:
            exception_str = self._format_exception(exc_info)
            if exception_str:
                line += f"\n{exception_str}"
        return line

    def _format_kv_pairs(self, event_dict: EventDict) -> str:
        """Format key-value pairs, coloring values by type."""
        pairs = []
        for key, value in event_dict.items():
            if key.startswith("_"):
                continue

            value_style: Style = colors.MUTED
            if isinstance(value, bool):
                value_style = colors.SUCCESS if value else colors.ERROR
            elif isinstance(value, (int, float)):
                value_style = colors.CORAL

            pairs.append(f"{render(f'{key}=', colors.MUTED)}{render(str(value), value_style)}")

        return " ".join(pairs)

    def _format_exception(self, exc_info: tuple[Any, ...] | BaseException | bool) -> str:
        """Format exception with the most recent frames only."""
        if exc_info is True:
            exc_info = sys.exc_info()
        elif isinstance(exc_info, BaseException):
            exc_info = (type(exc_info), exc_info, exc_info.__traceback__)

        if not exc_info or exc_info[0] is None:
            return ""

        exc_type, exc_value, exc_tb = exc_info

        tb_lines = traceback.format_tb(exc_tb)
        if len(tb_lines) > self.max_exception_frames:
            tb_lines = ["  ... (truncated)\n", *tb_lines[-self.max_exception_frames :]]

        indent = "          "  # Align with message content after the label
        formatted_tb = "".join(tb_lines).rstrip()
        formatted_tb = "\n".join(indent + line for line in formatted_tb.split("\n"))

        exc_name = exc_type.__name__
        if exc_type.__module__ and exc_type.__module__ != "builtins":
            exc_name = f"{exc_type.__module__}.{exc_name}"

        header = render(f"{indent}{exc_name}: {exc_value}", colors.ERROR)
        if not tb_lines:
            return header
        return f"{header}\n{render(formatted_tb, colors.MUTED)}"
