"""Run state: accumulated tests and results of one engine run."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from specreport.domain.model.enums import TestStatus

if TYPE_CHECKING:
    from collections.abc import Mapping

    from specreport.domain.model import Cause, Description, Spec, TestCase, TestResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSnapshot:
    """Immutable view of RunState.

    Created by RunState.snapshot(). Safe to read without the lock.

    Attributes:
        tests: Every started test case, in start order (duplicates kept)
        results: Description → latest result, in first-report order
        started_at: Clock reading at engine start. None if never started.
        spec_count: Spec blocks reported so far
        has_errors: Sticky error flag
        fatal_cause: Engine-wide fatal condition (pass-through)
    """

    tests: tuple[TestCase, ...]
    results: Mapping[Description, TestResult]
    started_at: float | None = None
    spec_count: int = 0
    has_errors: bool = False
    fatal_cause: Cause | None = None

    def tests_for(self, spec: Spec) -> tuple[TestCase, ...]:
        """Test cases of spec with a recorded result.

        Distinct by description, in first-start order. Started but
        unfinished tests are excluded.
        """
        seen: set[Description] = set()
        selected: list[TestCase] = []
        for test_case in self.tests:
            if not test_case.belongs_to(spec):
                continue
            if test_case.description in seen or test_case.description not in self.results:
                continue
            seen.add(test_case.description)
            selected.append(test_case)
        return tuple(selected)

    def partition(
        self,
    ) -> tuple[
        list[tuple[Description, TestResult]],
        list[tuple[Description, TestResult]],
        list[tuple[Description, TestResult]],
    ]:
        """Split results into (passed, failed, ignored), keeping mapping order."""
        passed: list[tuple[Description, TestResult]] = []
        failed: list[tuple[Description, TestResult]] = []
        ignored: list[tuple[Description, TestResult]] = []
        for description, result in self.results.items():
            match result.status:
                case TestStatus.SUCCESS:
                    passed.append((description, result))
                case TestStatus.FAILURE | TestStatus.ERROR:
                    failed.append((description, result))
                case TestStatus.IGNORED:
                    ignored.append((description, result))
        return passed, failed, ignored

    @property
    def distinct_spec_count(self) -> int:
        """Number of distinct owning specs across started tests."""
        return len({test_case.spec.qualified_name for test_case in self.tests})


@dataclass(slots=True)
class RunState:
    """Thread-safe, append-only state of a run.

    NOT frozen because it's a mutable collector. Nothing is ever removed.
    Call snapshot() to get an immutable view.

    Lock is reentrant so a caller can hold it across a mutation, a
    snapshot and the resulting output writes.
    """

    lock: threading.RLock = field(default_factory=threading.RLock)
    _tests: list[TestCase] = field(default_factory=list)
    _started: set[Description] = field(default_factory=set)
    _results: dict[Description, TestResult] = field(default_factory=dict)
    _started_at: float | None = None
    _spec_count: int = 0
    _has_errors: bool = False
    _fatal_cause: Cause | None = None

    def engine_started(self, now: float) -> None:
        """Record start timestamp. Only the first call counts. Thread-safe."""
        with self.lock:
            if self._started_at is not None:
                logger.warning("engine_started called more than once; keeping first start time")
                return
            self._started_at = now

    def test_started(self, test_case: TestCase) -> None:
        """Append to the test log. Thread-safe."""
        with self.lock:
            self._tests.append(test_case)
            self._started.add(test_case.description)

    def test_finished(self, test_case: TestCase, result: TestResult) -> None:
        """Upsert result; failures set the sticky error flag. Thread-safe."""
        with self.lock:
            if test_case.description not in self._started:
                logger.warning("test_finished without test_started: %s", test_case.description)
            self._results[test_case.description] = result
            if result.is_failed:
                self._has_errors = True

    def spec_instantiation_error(self, spec: Spec, cause: Cause) -> None:
        """Spec failed to construct. Thread-safe."""
        with self.lock:
            logger.debug("spec %s failed to instantiate: %s", spec.qualified_name, cause.message)
            self._has_errors = True

    def mark_errors(self) -> None:
        """Set the sticky error flag. Thread-safe."""
        with self.lock:
            self._has_errors = True

    def next_spec_ordinal(self) -> int:
        """Increment and return the spec ordinal (1-based). Thread-safe."""
        with self.lock:
            self._spec_count += 1
            return self._spec_count

    def engine_finished(self, fatal_cause: Cause | None) -> None:
        """Store the fatal cause. Thread-safe."""
        with self.lock:
            self._fatal_cause = fatal_cause

    @property
    def has_errors(self) -> bool:
        """Sticky error flag. Thread-safe."""
        with self.lock:
            return self._has_errors

    def snapshot(self) -> RunSnapshot:
        """Create immutable snapshot. Thread-safe."""
        with self.lock:
            return RunSnapshot(
                tests=tuple(self._tests),
                results=MappingProxyType(dict(self._results)),
                started_at=self._started_at,
                spec_count=self._spec_count,
                has_errors=self._has_errors,
                fatal_cause=self._fatal_cause,
            )
