"""Line formatter: one test result → one padded, indented, colorized line."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from rich.text import Text

from specreport.application.reporters.theme import GLYPHS, Glyphs, symbol_for
from specreport.domain.model.config import ReporterConfig
from specreport.domain.model.enums import TestStatus, TestType

if TYPE_CHECKING:
    from specreport.domain.model import Description, TestCase, TestResult
    from specreport.domain.ports import TermColors

FAILED_MARKER = "*** FAILED ***"
IGNORED_MARKER = "??? IGNORED ???"


def visible_length(text: str) -> int:
    """Length of text with ANSI control sequences removed."""
    return len(Text.from_ansi(text).plain)


class LineFormatter:
    """Renders test lines. Pure: no output, no state."""

    __slots__ = ("_config", "_glyphs", "_term")

    def __init__(
        self,
        term: TermColors,
        config: ReporterConfig | None = None,
        glyphs: Glyphs = GLYPHS,
    ) -> None:
        self._term = term
        self._config = config or ReporterConfig()
        self._glyphs = glyphs

    def indent(self, description: Description) -> str:
        """One indent unit per ancestor."""
        return self._config.indent_unit * description.depth

    def duration_annotation(self, duration_ms: int) -> str:
        """Yellow for slow_ms..very_slow_ms inclusive, red above, empty below."""
        if self._config.slow_ms <= duration_ms <= self._config.very_slow_ms:
            return self._term.bright_yellow(f"({duration_ms}ms)")
        if duration_ms > self._config.very_slow_ms:
            return self._term.bright_red(f"({duration_ms}ms)")
        return ""

    def name_segment(self, test_case: TestCase, status: TestStatus) -> str:
        """Test name with outcome marker."""
        match status:
            case TestStatus.SUCCESS:
                return test_case.name
            case TestStatus.FAILURE | TestStatus.ERROR:
                return self._term.bright_red(f"{test_case.name} {FAILED_MARKER}")
            case TestStatus.IGNORED:
                return self._term.gray(f"{test_case.name} {IGNORED_MARKER}")
            case _:
                assert_never(status)

    def render(self, test_case: TestCase, result: TestResult) -> str:
        """Format one test line.

        Args:
            test_case: Test or container being reported.
            result: Its recorded result.

        Returns:
            Line right-padded to the configured width (visible length).
        """
        symbol = symbol_for(result.status, self._glyphs).render(self._term)
        name = self.name_segment(test_case, result.status)
        duration = ""
        if test_case.type is TestType.TEST:
            duration = self.duration_annotation(result.duration_ms)

        line = f"{self._config.margin}{self.indent(test_case.description)} {symbol} {name} {duration}"
        padding = self._config.line_width - visible_length(line)
        if padding > 0:
            line += " " * padding
        return line
