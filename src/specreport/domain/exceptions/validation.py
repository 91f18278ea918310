"""Validation exceptions raised while building domain objects."""

from specreport.domain.exceptions.base import SpecReportError


class InvalidDescriptionError(SpecReportError):
    """Description path is malformed.

    Attributes:
        names: Offending path
        reason: Why path is invalid (must not be empty)
    """

    def __init__(self, names: tuple[str, ...], reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.names = names
        self.reason = reason
        super().__init__(f"Invalid description {names!r}: {reason}")


class InvalidThresholdsError(SpecReportError):
    """Slow / very slow thresholds are inconsistent.

    Attributes:
        slow_ms: Lower threshold
        very_slow_ms: Upper threshold
    """

    def __init__(self, slow_ms: int, very_slow_ms: int) -> None:
        self.slow_ms = slow_ms
        self.very_slow_ms = very_slow_ms
        super().__init__(
            f"Invalid duration thresholds: slow={slow_ms}ms, very_slow={very_slow_ms}ms "
            "(need 0 <= slow <= very_slow)"
        )
