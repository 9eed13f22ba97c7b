"""Tests for severity levels and their presentation table."""

import pytest

from quill import colors
from quill.levels import SEVERITIES, GlyphSet, Level, Severity, TimeMode


class TestLevel:
    """Tests for level priorities."""

    def test_high_outranks_low(self) -> None:
        assert Level.HIGH.priority > Level.LOW.priority

    def test_priorities(self) -> None:
        assert Level.LOW.priority == 1
        assert Level.HIGH.priority == 2

    def test_time_modes(self) -> None:
        assert {mode.value for mode in TimeMode} == {"none", "absolute", "elapsed"}


class TestSeverityTable:
    """Tests for the per-severity mapping."""

    def test_every_severity_has_traits(self) -> None:
        for severity in Severity:
            assert severity in SEVERITIES
            assert severity.traits is SEVERITIES[severity]

    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            (Severity.INFO, Level.LOW),
            (Severity.LOG, Level.LOW),
            (Severity.WARN, Level.HIGH),
            (Severity.ERROR, Level.HIGH),
            (Severity.SUCCESS, Level.HIGH),
        ],
    )
    def test_bound_levels(self, severity: Severity, level: Level) -> None:
        assert severity.level is level

    def test_bound_styles(self) -> None:
        assert Severity.INFO.style == colors.INFO
        assert Severity.LOG.style == colors.LOG
        assert Severity.WARN.style == colors.WARNING
        assert Severity.ERROR.style == colors.ERROR
        assert Severity.SUCCESS.style == colors.SUCCESS

    @pytest.mark.parametrize(
        ("severity", "label"),
        [
            (Severity.INFO, "[INFO]    "),
            (Severity.LOG, "[LOG]     "),
            (Severity.WARN, "[WARN]    "),
            (Severity.ERROR, "[ERROR]   "),
            (Severity.SUCCESS, "[SUCCESS] "),
        ],
    )
    def test_labels_are_padded(self, severity: Severity, label: str) -> None:
        assert severity.label() == label

    def test_ascii_glyphs(self) -> None:
        glyphs = [severity.glyph() for severity in Severity]
        assert glyphs == ["i ", "* ", "? ", "x ", "+ "]

    def test_unicode_glyphs(self) -> None:
        glyphs = [severity.glyph(GlyphSet.UNICODE) for severity in Severity]
        assert glyphs == ["¡ ", "• ", "? ", "✖ ", "✔ "]

    def test_glyph_accepts_plain_string(self) -> None:
        assert Severity.ERROR.glyph("unicode") == "✖ "  # type: ignore[arg-type]
