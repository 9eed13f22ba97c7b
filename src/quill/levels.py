"""Severity levels, timestamp modes and the per-severity presentation table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from quill import colors
from quill.style import Style


class Level(StrEnum):
    """Filtering priority. A message is shown when its level meets the threshold."""

    LOW = "low"  # informational and standard logs
    HIGH = "high"  # warnings, errors and success notifications

    @property
    def priority(self) -> int:
        return _PRIORITIES[self]


_PRIORITIES: dict[Level, int] = {Level.LOW: 1, Level.HIGH: 2}


class TimeMode(StrEnum):
    """How the timestamp prefix is produced."""

    NONE = "none"
    ABSOLUTE = "absolute"  # wall clock, formatted with the configured pattern
    ELAPSED = "elapsed"  # [MM:SS:mmm] since the pipeline started


class GlyphSet(StrEnum):
    """Which symbol family replaces the type label when labels are hidden."""

    ASCII = "ascii"
    UNICODE = "unicode"


class Severity(StrEnum):
    """The five message kinds a pipeline can emit."""

    INFO = "info"
    LOG = "log"
    WARN = "warn"
    ERROR = "error"
    SUCCESS = "success"

    @property
    def traits(self) -> SeverityTraits:
        return SEVERITIES[self]

    @property
    def level(self) -> Level:
        return SEVERITIES[self].level

    @property
    def style(self) -> Style:
        return SEVERITIES[self].style

    def label(self) -> str:
        """Bracketed name padded so messages line up, e.g. ``"[WARN]    "``."""
        return f"{'[' + self.name + ']':<10}"

    def glyph(self, glyphs: GlyphSet = GlyphSet.ASCII) -> str:
        """Single symbol plus a separating space."""
        traits = SEVERITIES[self]
        symbol = traits.unicode_glyph if glyphs == GlyphSet.UNICODE else traits.ascii_glyph
        return f"{symbol} "


@dataclass(frozen=True, slots=True)
class SeverityTraits:
    """Fixed presentation of one severity."""

    level: Level
    style: Style
    ascii_glyph: str
    unicode_glyph: str


SEVERITIES: dict[Severity, SeverityTraits] = {
    Severity.INFO: SeverityTraits(Level.LOW, colors.INFO, "i", "¡"),
    Severity.LOG: SeverityTraits(Level.LOW, colors.LOG, "*", "•"),
    Severity.WARN: SeverityTraits(Level.HIGH, colors.WARNING, "?", "?"),
    Severity.ERROR: SeverityTraits(Level.HIGH, colors.ERROR, "x", "✖"),
    Severity.SUCCESS: SeverityTraits(Level.HIGH, colors.SUCCESS, "+", "✔"),
}
