"""quill structlog integration.

Renders structlog events through a ``Quill`` pipeline.

Usage:
    from quill.logging import configure_logging, get_logger

    # At application startup
    configure_logging(level="INFO")

    # In modules
    log = get_logger()
    log.info("Server starting", port=3334)
"""

from quill.logging.config import (
    QuillHandler,
    QuillLogger,
    QuillLoggerFactory,
    configure_logging,
    get_logger,
)
from quill.logging.formatters import METHOD_SEVERITIES, QuillRenderer

__all__ = [
    "METHOD_SEVERITIES",
    "QuillHandler",
    "QuillLogger",
    "QuillLoggerFactory",
    "QuillRenderer",
    "configure_logging",
    "get_logger",
]
