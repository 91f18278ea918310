"""Spec block: header, test lines and inline causes of one finished spec."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specreport.application.reporters.line_formatter import FAILED_MARKER, LineFormatter
from specreport.domain.model.config import ReporterConfig

if TYPE_CHECKING:
    from specreport.application.collectors import RunSnapshot
    from specreport.domain.model import Cause, Spec, TestCase
    from specreport.domain.ports import TermColors


class SpecBlockRenderer:
    """Renders spec blocks as lists of lines.

    Output is lines, not print(). Caller decides destination.
    """

    __slots__ = ("_config", "_formatter", "_term")

    def __init__(
        self,
        term: TermColors,
        formatter: LineFormatter | None = None,
        config: ReporterConfig | None = None,
    ) -> None:
        self._term = term
        self._config = config or ReporterConfig()
        self._formatter = formatter or LineFormatter(term, self._config)

    def render(
        self,
        ordinal: int,
        spec: Spec,
        cause: Cause | None,
        snapshot: RunSnapshot,
    ) -> list[str]:
        """Render a finished spec.

        Args:
            ordinal: Running spec number (1-based).
            spec: Finished spec.
            cause: Spec-level failure outside any test, if any.
            snapshot: Run state at the time the spec finished.

        Returns:
            Lines of the block, including the trailing blank line.
        """
        margin = self._config.margin
        if cause is None:
            lines = [f"{margin}{ordinal}) " + self._term.bright_white(spec.qualified_name), ""]
        else:
            lines = self._failed_header(ordinal, spec, cause)
        for test_case in snapshot.tests_for(spec):
            result = snapshot.results[test_case.description]
            lines.append(self._formatter.render(test_case, result))
            if result.cause is not None:
                lines.extend(["", self._test_cause_line(test_case, result.cause), ""])
        lines.append("")
        return lines

    def render_instantiation_error(self, ordinal: int, spec: Spec, cause: Cause) -> list[str]:
        """Header-only failure block: no test lines follow."""
        return [*self._failed_header(ordinal, spec, cause), ""]

    def _failed_header(self, ordinal: int, spec: Spec, cause: Cause) -> list[str]:
        margin = self._config.margin
        # Single closing parenthesis is part of the established output format.
        return [
            f"{margin}{ordinal}) " + self._term.red(f"{spec.qualified_name} {FAILED_MARKER}"),
            f"{margin}{self._config.indent_unit}" + self._term.red(f"cause: {cause.message or ''})"),
            "",
        ]

    def _test_cause_line(self, test_case: TestCase, cause: Cause) -> str:
        margin = self._config.margin
        return f"{margin}{self._config.indent_unit}" + self._term.bright_red(
            f"cause: {cause.message or ''} ({test_case.source})"
        )
