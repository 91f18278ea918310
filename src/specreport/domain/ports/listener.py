"""Engine listener ports.

Lifecycle protocol consumed from the test-execution engine. Every hook is a
one-way notification: return values never affect execution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from specreport.domain.model import Cause, Spec, TestCase, TestResult


class EngineListener(Protocol):
    """Hooks called by the engine in fixed temporal order.

    engine_started precedes all spec/test events, which precede
    engine_finished. Spec and test events may interleave and may arrive
    from several worker threads.
    """

    def engine_started(self, specs: Sequence[Spec]) -> None:
        """Called once, before any other hook."""
        ...

    def spec_instantiation_error(self, spec: Spec, cause: Cause) -> None:
        """Spec failed to construct. No test events follow for it."""
        ...

    def test_started(self, test_case: TestCase) -> None:
        """Test or container started."""
        ...

    def test_finished(self, test_case: TestCase, result: TestResult) -> None:
        """Test or container finished with result."""
        ...

    def spec_finished(
        self,
        spec: Spec,
        cause: Cause | None,
        results: Mapping[TestCase, TestResult],
    ) -> None:
        """Spec completed. cause is set only if the spec itself failed outside any test."""
        ...

    def engine_finished(self, cause: Cause | None) -> None:
        """Called once, after all other hooks. cause is an engine-wide fatal condition."""
        ...


class ConsoleWriter(EngineListener, Protocol):
    """Listener that renders to a terminal and reports overall status."""

    def has_errors(self) -> bool:
        """Sticky flag consumed by the runner to pick the exit status."""
        ...
