"""
quill: styled terminal output and a leveled print pipeline.

This package provides:
- Style values, color builders and lock-aware ANSI rendering
- A named color palette with semantic aliases
- The ``Quill`` pipeline (level filtering, prefixes, synchronized output)
- A lock-aware stream wrapper
- structlog integration (see ``quill.logging``)
"""

from quill import colors
from quill._version import __version__, get_version
from quill.config import QuillConfig
from quill.errors import InterruptedWaitError, InvalidColorError, QuillError
from quill.levels import GlyphSet, Level, Severity, TimeMode
from quill.pipeline import Quill, Sink, get_pipeline
from quill.stream import LockedStream
from quill.style import (
    BOLD,
    DIM,
    INVERT,
    ITALIC,
    LOCK_END,
    LOCK_START,
    RESET,
    STRIKETHROUGH,
    UNDERLINE,
    Style,
    bg,
    bg256,
    close,
    fg,
    fg256,
    is_locked,
    lock,
    open_styles,
    render,
    unlock,
)

__all__ = [
    # Styles
    "BOLD",
    "DIM",
    "INVERT",
    "ITALIC",
    "LOCK_END",
    "LOCK_START",
    "RESET",
    "STRIKETHROUGH",
    "UNDERLINE",
    "Style",
    "bg",
    "bg256",
    "close",
    "colors",
    "fg",
    "fg256",
    "is_locked",
    "lock",
    "open_styles",
    "render",
    "unlock",
    # Pipeline
    "GlyphSet",
    "Level",
    "LockedStream",
    "Quill",
    "QuillConfig",
    "Severity",
    "Sink",
    "TimeMode",
    "get_pipeline",
    # Errors
    "InterruptedWaitError",
    "InvalidColorError",
    "QuillError",
    # Version
    "__version__",
    "get_version",
]
