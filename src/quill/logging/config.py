"""structlog configuration for quill pipelines.

Usage:
    from quill.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    log = get_logger()
    log.info("Server starting", port=3334)
    log.success("Ready")
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from quill.logging.formatters import QuillRenderer
from quill.pipeline import Quill, get_pipeline


class QuillLogger:
    """structlog wrapped logger writing rendered lines through a pipeline."""

    def __init__(self, pipeline: Quill) -> None:
        self._pipeline = pipeline

    def msg(self, message: str) -> None:
        self._pipeline.write_line(message)

    log = debug = info = warn = warning = msg
    fatal = failure = err = error = critical = exception = success = msg


class QuillLoggerFactory:
    """Produce ``QuillLogger`` instances bound to one pipeline."""

    def __init__(self, pipeline: Quill) -> None:
        self._pipeline = pipeline

    def __call__(self, *args: object) -> QuillLogger:
        return QuillLogger(self._pipeline)


class QuillHandler(logging.Handler):
    """stdlib handler writing formatted records through a pipeline."""

    def __init__(self, pipeline: Quill, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.pipeline = pipeline

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except structlog.DropEvent:
            # Below the pipeline threshold
            return
        except Exception:
            self.handleError(record)
            return
        self.pipeline.write_line(line)


def _bound_logger_class(min_level: int) -> type[Any]:
    """Filtering bound logger with a ``success`` method at info priority."""
    base = structlog.make_filtering_bound_logger(min_level)
    enabled = min_level <= logging.INFO

    class QuillBoundLogger(base):  # type: ignore[misc,valid-type]
        def success(self, event: str, *args: Any, **kw: Any) -> Any:
            if not enabled:
                return None
            if not args:
                return self._proxy_to_logger("success", event, **kw)
            return self._proxy_to_logger("success", event % args, **kw)

    return QuillBoundLogger


def configure_logging(
    pipeline: Quill | None = None,
    *,
    level: str = "DEBUG",
    show_type: bool | None = None,
) -> Quill:
    """Configure structlog and stdlib logging to render through a quill pipeline.

    Call this once at application startup before any logging.

    Args:
        pipeline: Target pipeline (the shared default pipeline if None)
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR); the
            pipeline's own threshold still applies afterwards
        show_type: Force [TYPE] labels on or off for logged events

    Returns:
        The pipeline events are written to
    """
    pipeline = pipeline or get_pipeline()
    min_level = getattr(logging, level.upper(), logging.INFO)

    # Configure stdlib logging first
    _configure_stdlib_logging(min_level, pipeline, show_type)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            QuillRenderer(pipeline, show_type=show_type),
        ],
        wrapper_class=_bound_logger_class(min_level),
        context_class=dict,
        logger_factory=QuillLoggerFactory(pipeline),
        cache_logger_on_first_use=False,
    )
    return pipeline


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional logger name (usually module __name__)

    Returns:
        Configured structlog bound logger
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name)


def _configure_stdlib_logging(level: int, pipeline: Quill, show_type: bool | None) -> None:
    """Route stdlib logging records through ``pipeline``.

    Any ``QuillHandler`` from an earlier call is replaced; other root handlers
    are kept.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, QuillHandler):
            root.removeHandler(handler)

    handler = QuillHandler(pipeline)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                QuillRenderer(pipeline, show_type=show_type),
            ],
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.UnicodeDecoder(),
            ],
        )
    )
    root.addHandler(handler)
    root.setLevel(level)
