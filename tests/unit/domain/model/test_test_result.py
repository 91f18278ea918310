"""Tests for TestResult, Cause, TestStatus."""

from datetime import timedelta

import pytest

from specreport.domain.model import Cause, TestResult, TestStatus


class TestTestStatus:
    """Tests for TestStatus."""

    @pytest.mark.parametrize(
        ("status", "failed"),
        [
            (TestStatus.SUCCESS, False),
            (TestStatus.FAILURE, True),
            (TestStatus.ERROR, True),
            (TestStatus.IGNORED, False),
        ],
    )
    def test_is_failed(self, status: TestStatus, failed: bool) -> None:
        """FAILURE and ERROR count as failed."""
        assert status.is_failed is failed


class TestTestResultValidation:
    """FAIL-FIRST validation of TestResult."""

    def test_negative_duration_raises(self) -> None:
        """Negative duration is rejected."""
        with pytest.raises(ValueError, match="duration"):
            TestResult(TestStatus.SUCCESS, timedelta(milliseconds=-1))

    def test_failure_without_cause_raises(self) -> None:
        """FAILURE requires a cause."""
        with pytest.raises(ValueError, match="requires a cause"):
            TestResult(TestStatus.FAILURE)

    def test_error_without_cause_raises(self) -> None:
        """ERROR requires a cause."""
        with pytest.raises(ValueError, match="requires a cause"):
            TestResult(TestStatus.ERROR)

    def test_success_with_cause_raises(self) -> None:
        """SUCCESS must not carry a cause."""
        with pytest.raises(ValueError, match="must not carry"):
            TestResult(TestStatus.SUCCESS, cause=Cause("x"))


class TestTestResultFactories:
    """Tests for factory classmethods."""

    def test_success(self) -> None:
        result = TestResult.success(timedelta(milliseconds=50))
        assert result.status is TestStatus.SUCCESS
        assert result.duration_ms == 50
        assert not result.is_failed

    def test_failure(self) -> None:
        cause = Cause("boom")
        result = TestResult.failure(cause)
        assert result.status is TestStatus.FAILURE
        assert result.cause is cause
        assert result.is_failed

    def test_error(self) -> None:
        assert TestResult.error(Cause("boom")).status is TestStatus.ERROR

    def test_ignored(self) -> None:
        result = TestResult.ignored()
        assert result.status is TestStatus.IGNORED
        assert result.duration == timedelta(0)

    def test_duration_ms_truncates(self) -> None:
        """Sub-millisecond part is dropped."""
        assert TestResult.success(timedelta(microseconds=1999)).duration_ms == 1


class TestCause:
    """Tests for Cause."""

    def test_defaults(self) -> None:
        cause = Cause()
        assert cause.message is None
        assert cause.stack_trace == ()
        assert cause.error_type == "Error"

    def test_list_stack_trace_raises(self) -> None:
        with pytest.raises(TypeError, match="stack_trace"):
            Cause(stack_trace=["frame"])  # type: ignore[arg-type]

    def test_empty_error_type_raises(self) -> None:
        with pytest.raises(ValueError, match="error_type"):
            Cause(error_type="")

    def test_from_raised_exception(self) -> None:
        """from_exception() captures message, builtin type name and frames."""
        try:
            raise AssertionError("expected 1 but was 2")
        except AssertionError as exc:
            cause = Cause.from_exception(exc)

        assert cause.message == "expected 1 but was 2"
        assert cause.error_type == "AssertionError"
        assert len(cause.stack_trace) == 1
        assert "test_from_raised_exception" in cause.stack_trace[0]

    def test_from_unraised_exception(self) -> None:
        """Exception without traceback gives empty stack, no message if blank."""
        cause = Cause.from_exception(RuntimeError())
        assert cause.message is None
        assert cause.stack_trace == ()

    def test_from_custom_exception_is_qualified(self) -> None:
        """Non-builtin exception types are module-qualified."""

        class CustomError(Exception):
            pass

        cause = Cause.from_exception(CustomError("x"))
        assert cause.error_type.endswith("CustomError")
        assert "." in cause.error_type
