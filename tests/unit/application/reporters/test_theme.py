"""Tests for status theme: symbols, colors, platform glyphs."""

import pytest

from specreport.application.reporters.theme import (
    ASCII_GLYPHS,
    GLYPHS,
    UNICODE_GLYPHS,
    Color,
    Symbol,
    glyphs_for,
    is_windows,
    paint,
    symbol_for,
)
from specreport.domain.model import TestStatus
from specreport.infrastructure.colors import PlainTermColors
from tests.factories import RecordingTermColors


class TestGlyphs:
    """Platform-dependent glyph selection."""

    @pytest.mark.parametrize("platform", ["linux", "darwin", "freebsd13"])
    def test_non_windows_is_unicode(self, platform: str) -> None:
        assert glyphs_for(platform) == UNICODE_GLYPHS
        assert UNICODE_GLYPHS.success == "✔"
        assert UNICODE_GLYPHS.failure == "✘"

    @pytest.mark.parametrize("platform", ["win32", "cygwin"])
    def test_windows_is_ascii(self, platform: str) -> None:
        assert is_windows(platform)
        assert glyphs_for(platform) == ASCII_GLYPHS
        assert (ASCII_GLYPHS.success, ASCII_GLYPHS.failure, ASCII_GLYPHS.ignored) == ("√", "X", "-")

    def test_process_glyphs_decided_once(self) -> None:
        """Module-level glyph set is one of the two known sets."""
        assert GLYPHS in (UNICODE_GLYPHS, ASCII_GLYPHS)


class TestSymbolFor:
    """status → (glyph, color)."""

    @pytest.mark.parametrize(
        ("status", "glyph", "color"),
        [
            (TestStatus.SUCCESS, "✔", Color.BRIGHT_GREEN),
            (TestStatus.FAILURE, "✘", Color.BRIGHT_RED),
            (TestStatus.ERROR, "✘", Color.BRIGHT_RED),
            (TestStatus.IGNORED, "-", Color.GRAY),
        ],
    )
    def test_unicode_mapping(self, status: TestStatus, glyph: str, color: Color) -> None:
        assert symbol_for(status, UNICODE_GLYPHS) == Symbol(glyph, color)

    def test_ascii_mapping(self) -> None:
        assert symbol_for(TestStatus.SUCCESS, ASCII_GLYPHS).glyph == "√"
        assert symbol_for(TestStatus.ERROR, ASCII_GLYPHS).glyph == "X"

    def test_deterministic(self) -> None:
        assert symbol_for(TestStatus.FAILURE) == symbol_for(TestStatus.FAILURE)

    def test_render_goes_through_term(self) -> None:
        symbol = symbol_for(TestStatus.SUCCESS, UNICODE_GLYPHS)
        assert symbol.render(RecordingTermColors()) == "<bright_green>✔</bright_green>"
        assert symbol.render(PlainTermColors()) == "✔"


class TestPaint:
    """paint() dispatches to the matching TermColors method."""

    @pytest.mark.parametrize(
        ("color", "tag"),
        [
            (Color.BRIGHT_GREEN, "bright_green"),
            (Color.BRIGHT_RED, "bright_red"),
            (Color.RED, "red"),
            (Color.GRAY, "gray"),
            (Color.BRIGHT_YELLOW, "bright_yellow"),
            (Color.BRIGHT_WHITE, "bright_white"),
        ],
    )
    def test_every_color(self, color: Color, tag: str) -> None:
        assert paint(RecordingTermColors(), color, "x") == f"<{tag}>x</{tag}>"
