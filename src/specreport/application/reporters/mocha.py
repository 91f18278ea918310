"""Mocha-style console writer: lifecycle hooks → terminal report.

Thread Safety:
  - One reentrant lock (shared with RunState) serializes every hook:
    state mutation, snapshot read and output writes.
  - Output order therefore follows hook delivery order.

Exception Algebra:
  - Hooks NEVER raise into the engine.
  - Rendering/output exceptions are logged and kept in render_errors.
"""

from __future__ import annotations

import functools
import logging
import sys
import time
from typing import TYPE_CHECKING, Concatenate, ParamSpec

from specreport.application.collectors import RunSnapshot, RunState
from specreport.application.reporters.line_formatter import LineFormatter
from specreport.application.reporters.spec_block import SpecBlockRenderer
from specreport.application.reporters.summary import SummaryRenderer
from specreport.application.reporters.theme import GLYPHS, Glyphs
from specreport.domain.model.config import ReporterConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence
    from typing import TextIO

    from specreport.domain.model import Cause, Spec, TestCase, TestResult
    from specreport.domain.ports import TermColors

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def _absorbing(
    hook: Callable[Concatenate[MochaConsoleWriter, P], None],
) -> Callable[Concatenate[MochaConsoleWriter, P], None]:
    """Run hook under the writer lock; capture any exception instead of raising."""

    @functools.wraps(hook)
    def wrapper(self: MochaConsoleWriter, *args: P.args, **kwargs: P.kwargs) -> None:
        with self._state.lock:
            try:
                hook(self, *args, **kwargs)
            # BLE001: reporter must never abort the run
            except Exception as exc:  # noqa: BLE001
                logger.exception("%s failed; continuing", hook.__name__)
                self._render_errors.append(exc)

    return wrapper


class MochaConsoleWriter:
    """Console writer printing a mocha-style report.

    Implements ConsoleWriter. Prints a block per finished spec and a summary
    when the engine finishes. has_errors() is the only outward signal
    beyond printed text.
    """

    __slots__ = (
        "_clock",
        "_config",
        "_output",
        "_render_errors",
        "_spec_renderer",
        "_state",
        "_summary_renderer",
        "_term",
    )

    def __init__(
        self,
        term: TermColors | None = None,
        config: ReporterConfig | None = None,
        output: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
        glyphs: Glyphs = GLYPHS,
    ) -> None:
        """Initialize writer.

        Args:
            term: Color provider. Uses RichTermColors on the output stream if None.
            config: Reporter configuration. Uses defaults if None.
            output: Output stream (default: sys.stdout)
            clock: Seconds clock for elapsed time.
            glyphs: Glyph set. Defaults to the process-wide set.
        """
        self._output = output if output is not None else sys.stdout
        if term is None:
            from rich.console import Console

            from specreport.infrastructure.colors import RichTermColors

            term = RichTermColors(Console(file=self._output, highlight=False))
        self._term = term
        self._config = config or ReporterConfig()
        self._clock = clock
        self._state = RunState()
        self._render_errors: list[Exception] = []

        formatter = LineFormatter(term, self._config, glyphs)
        self._spec_renderer = SpecBlockRenderer(term, formatter, self._config)
        self._summary_renderer = SummaryRenderer(term, self._config, glyphs)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_errors(self) -> bool:
        """True once any failure, error or spec failure was seen. Never resets."""
        return self._state.has_errors

    @property
    def fatal_cause(self) -> Cause | None:
        """Engine-wide fatal cause passed to engine_finished (pass-through)."""
        return self._state.snapshot().fatal_cause

    @property
    def render_errors(self) -> tuple[Exception, ...]:
        """Exceptions absorbed while handling hooks."""
        with self._state.lock:
            return tuple(self._render_errors)

    def snapshot(self) -> RunSnapshot:
        """Immutable view of the accumulated run state."""
        return self._state.snapshot()

    # -------------------------------------------------------------------------
    # Lifecycle hooks
    # -------------------------------------------------------------------------

    @_absorbing
    def engine_started(self, specs: Sequence[Spec]) -> None:
        logger.debug("engine started with %d specs", len(specs))
        self._state.engine_started(self._clock())

    @_absorbing
    def spec_instantiation_error(self, spec: Spec, cause: Cause) -> None:
        self._state.spec_instantiation_error(spec, cause)
        ordinal = self._state.next_spec_ordinal()
        self._write_lines(self._spec_renderer.render_instantiation_error(ordinal, spec, cause))

    @_absorbing
    def test_started(self, test_case: TestCase) -> None:
        logger.debug("test started: %s", test_case.description)
        self._state.test_started(test_case)

    @_absorbing
    def test_finished(self, test_case: TestCase, result: TestResult) -> None:
        logger.debug("test finished: %s %s", test_case.description, result.status.name)
        self._state.test_finished(test_case, result)

    @_absorbing
    def spec_finished(
        self,
        spec: Spec,
        cause: Cause | None,
        results: Mapping[TestCase, TestResult],
    ) -> None:
        logger.debug("spec finished: %s (%d results)", spec.qualified_name, len(results))
        if cause is not None:
            self._state.mark_errors()
        ordinal = self._state.next_spec_ordinal()
        self._write_lines(
            self._spec_renderer.render(ordinal, spec, cause, self._state.snapshot())
        )

    @_absorbing
    def engine_finished(self, cause: Cause | None) -> None:
        if cause is not None:
            logger.warning("engine finished with fatal cause: %s", cause.message)
        self._state.engine_finished(cause)
        self._write_lines(self._summary_renderer.render(self._state.snapshot(), self._clock()))

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            print(line, file=self._output)
        self._output.flush()
