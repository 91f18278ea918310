"""Summary: totals and detailed failure section for the whole run."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specreport.application.reporters.theme import GLYPHS, Glyphs
from specreport.domain.model.config import ReporterConfig

if TYPE_CHECKING:
    from specreport.application.collectors import RunSnapshot
    from specreport.domain.model import Cause, Description
    from specreport.domain.ports import TermColors

BANNER_RULE = "-" * 29


def pad_lines(text: str, pad: str) -> str:
    """Prefix every line of text with pad."""
    return "\n".join(f"{pad}{line}" for line in text.splitlines() or [""])


class SummaryRenderer:
    """Renders the end-of-run summary as lines.

    Counts come from the result mapping only, so they always equal the
    number of test lines printed across spec blocks.
    """

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

    def render(self, snapshot: RunSnapshot, now: float) -> list[str]:
        """Render summary.

        Args:
            snapshot: Final run state.
            now: Clock reading at engine finish (same clock as started_at).

        Returns:
            Summary lines.
        """
        margin = self._config.margin
        passed, failed, ignored = snapshot.partition()
        total = len(passed) + len(failed) + len(ignored)

        elapsed = max(now - snapshot.started_at, 0.0) if snapshot.started_at is not None else 0.0
        elapsed_ms = int(elapsed * 1000)

        lines = [
            "",
            self._term.bright_white(
                f"{margin}Completed in {elapsed:.3f} seconds / {elapsed_ms} milliseconds"
            ),
            f"{margin}Executed {snapshot.distinct_spec_count} specs containing {total} tests",
            f"{margin}{len(passed)} passed, {len(failed)} failed, {len(ignored)} ignored",
        ]

        if failed:
            lines.append("")
            lines.append(
                self._term.bright_white(
                    f"{margin}{BANNER_RULE} {len(failed)} FAILURES {BANNER_RULE}"
                )
            )
            for description, result in failed:
                lines.extend(self._failure_entry(description, result.cause))

        return lines

    def _failure_entry(self, description: Description, cause: Cause | None) -> list[str]:
        margin = self._config.margin
        lines = [
            "",
            f"{margin}{self._term.bright_red(self._glyphs.failure)} "
            + self._term.bright_white(description.full_name()),
            "",
        ]
        if cause is None:
            return lines

        if cause.message:
            lines.append(self._term.bright_red(pad_lines(cause.message, margin)))
            lines.append("")
        lines.append(margin + self._term.red(cause.error_type))
        if cause.stack_trace:
            lines.append(self._term.red(pad_lines("\n".join(cause.stack_trace), margin * 2)))
        return lines
