"""Style engine - ANSI style values, color builders and lock-aware rendering.

A ``Style`` is an immutable wrapper around a raw escape-code string. Styles
compose left to right, so later codes win when the terminal applies them.

Rendering wraps every literal run of a message in the requested style codes
and a reset, while embedded escape sequences and locked segments pass through
byte-for-byte::

    from quill import colors
    from quill.style import lock, render

    render("Message with " + lock("DO NOT MODIFY") + " inside", colors.AMBER)
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from quill.errors import InvalidColorError

ESC = "\x1b"

# Private-mode sequences that no terminal uses; reserved for locked segments.
LOCK_START = f"{ESC}[?200h"
LOCK_END = f"{ESC}[?200l"

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
HEX_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")

_LOCK_MARKER = re.compile(f"{re.escape(LOCK_START)}|{re.escape(LOCK_END)}")


@dataclass(frozen=True, slots=True)
class Style:
    """An ANSI escape-code string that can be composed with other styles."""

    code: str

    def and_(self, other: Style) -> Style:
        """Combine two styles; ``self`` is applied first."""
        return Style(self.code + other.code)

    def __add__(self, other: Style) -> Style:
        if not isinstance(other, Style):
            return NotImplemented
        return self.and_(other)

    def __str__(self) -> str:
        return self.code


# =============================================================================
# Core Codes
# =============================================================================

RESET = Style(f"{ESC}[0m")

BOLD = Style(f"{ESC}[1m")
DIM = Style(f"{ESC}[2m")
ITALIC = Style(f"{ESC}[3m")
UNDERLINE = Style(f"{ESC}[4m")
INVERT = Style(f"{ESC}[7m")
STRIKETHROUGH = Style(f"{ESC}[9m")


# =============================================================================
# Color Builders
# =============================================================================


def _component(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise InvalidColorError(value, "Color component must be an int in 0-255")
    return value


def _rgb(r: int | str, g: int | None, b: int | None, *, layer: int) -> Style:
    if isinstance(r, str):
        if g is not None or b is not None:
            raise InvalidColorError((r, g, b), "Hex color takes a single argument")
        r, g, b = parse_hex(r)
    elif g is None or b is None:
        raise InvalidColorError((r, g, b), "RGB color needs three components")
    return Style(f"{ESC}[{layer};2;{_component(r)};{_component(g)};{_component(b)}m")


def parse_hex(value: str) -> tuple[int, int, int]:
    """Split ``#RRGGBB`` or ``RRGGBB`` (any case) into RGB components."""
    if not isinstance(value, str) or not HEX_PATTERN.fullmatch(value):
        raise InvalidColorError(value, "Invalid hex color")
    digits = value.removeprefix("#")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def fg(r: int | str, g: int | None = None, b: int | None = None) -> Style:
    """Truecolor foreground from RGB components or a hex string."""
    return _rgb(r, g, b, layer=38)


def bg(r: int | str, g: int | None = None, b: int | None = None) -> Style:
    """Truecolor background from RGB components or a hex string."""
    return _rgb(r, g, b, layer=48)


def fg256(index: int) -> Style:
    """256-color palette foreground."""
    return Style(f"{ESC}[38;5;{_component(index)}m")


def bg256(index: int) -> Style:
    """256-color palette background."""
    return Style(f"{ESC}[48;5;{_component(index)}m")


# =============================================================================
# Lock System
# =============================================================================


def lock(text: str) -> str:
    """Protect ``text`` from being restyled by later ``render`` calls."""
    return LOCK_START + text + LOCK_END


def unlock(text: str) -> str:
    """Remove every lock marker from ``text``."""
    return text.replace(LOCK_START, "").replace(LOCK_END, "")


def is_locked(text: str) -> bool:
    """True when both lock markers appear anywhere in ``text``.

    Pairing is not checked: a stray start marker and an unrelated end marker
    still count as locked.
    """
    return LOCK_START in text and LOCK_END in text


def _segments(text: str) -> Iterator[str]:
    """Split ``text`` into unlocked runs and outermost locked regions.

    Nested locks stay inside their enclosing region. An end marker with no open
    region is left in the surrounding run; a region that never closes extends
    to the end of the text.
    """
    depth = 0
    start = 0
    for marker in _LOCK_MARKER.finditer(text):
        if marker.group() == LOCK_START:
            if depth == 0:
                if marker.start() > start:
                    yield text[start : marker.start()]
                start = marker.start()
            depth += 1
        elif depth:
            depth -= 1
            if depth == 0:
                yield text[start : marker.end()]
                start = marker.end()
    if start < len(text):
        yield text[start:]


# =============================================================================
# Application
# =============================================================================


def open_styles(*styles: Style) -> str:
    """Concatenated codes for ``styles`` with no closing reset."""
    return "".join(style.code for style in styles)


def close() -> str:
    """The reset code."""
    return RESET.code


def render(text: str, *styles: Style) -> str:
    """Apply ``styles`` to every literal run of ``text``.

    Each run of plain text becomes ``<style codes><text><reset>``. Escape
    sequences already present are copied verbatim, and so are locked segments
    including anything inside them. With no styles the literal runs are still
    closed with a reset. Empty or ``None`` input is returned as given.
    """
    if not text:
        return text

    opening = open_styles(*styles)
    parts: list[str] = []
    for segment in _segments(text):
        if is_locked(segment):
            parts.append(segment)
            continue

        last = 0
        for match in ANSI_PATTERN.finditer(segment):
            if match.start() > last:
                parts.append(f"{opening}{segment[last : match.start()]}{RESET.code}")
            parts.append(match.group())
            last = match.end()
        if last < len(segment):
            parts.append(f"{opening}{segment[last:]}{RESET.code}")

    return "".join(parts)
