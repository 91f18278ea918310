"""Status theme: test outcome → display symbol and color.

Glyph set is picked once per process from the host platform. Windows
consoles get an ASCII-safe fallback.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, assert_never

from specreport.domain.model.enums import TestStatus

if TYPE_CHECKING:
    from specreport.domain.ports import TermColors


class Color(Enum):
    """Semantic colors used by the reporters."""

    BRIGHT_GREEN = auto()
    BRIGHT_RED = auto()
    RED = auto()
    GRAY = auto()
    BRIGHT_YELLOW = auto()
    BRIGHT_WHITE = auto()


def paint(term: TermColors, color: Color, text: str) -> str:
    """Wrap text in color via the TermColors port."""
    match color:
        case Color.BRIGHT_GREEN:
            return term.bright_green(text)
        case Color.BRIGHT_RED:
            return term.bright_red(text)
        case Color.RED:
            return term.red(text)
        case Color.GRAY:
            return term.gray(text)
        case Color.BRIGHT_YELLOW:
            return term.bright_yellow(text)
        case Color.BRIGHT_WHITE:
            return term.bright_white(text)
        case _:
            assert_never(color)


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Glyph set for status symbols.

    Attributes:
        success: Passed test
        failure: Failed or errored test
        ignored: Ignored test
    """

    success: str
    failure: str
    ignored: str


UNICODE_GLYPHS = Glyphs(success="✔", failure="✘", ignored="-")
ASCII_GLYPHS = Glyphs(success="√", failure="X", ignored="-")


def is_windows(platform: str) -> bool:
    """True for Windows platform names (sys.platform values)."""
    return platform.startswith("win") or platform == "cygwin"


def glyphs_for(platform: str) -> Glyphs:
    """Glyph set for a platform name."""
    return ASCII_GLYPHS if is_windows(platform) else UNICODE_GLYPHS


GLYPHS = glyphs_for(sys.platform)


@dataclass(frozen=True, slots=True)
class Symbol:
    """Status glyph and its color."""

    glyph: str
    color: Color

    def render(self, term: TermColors) -> str:
        """Colored glyph."""
        return paint(term, self.color, self.glyph)


def symbol_for(status: TestStatus, glyphs: Glyphs = GLYPHS) -> Symbol:
    """Symbol for a test outcome.

    Args:
        status: Test outcome.
        glyphs: Glyph set. Defaults to the process-wide set.

    Returns:
        Symbol with glyph and color.
    """
    match status:
        case TestStatus.SUCCESS:
            return Symbol(glyphs.success, Color.BRIGHT_GREEN)
        case TestStatus.FAILURE | TestStatus.ERROR:
            return Symbol(glyphs.failure, Color.BRIGHT_RED)
        case TestStatus.IGNORED:
            return Symbol(glyphs.ignored, Color.GRAY)
        case _:
            assert_never(status)
