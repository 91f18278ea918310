"""Reporter configuration."""

from dataclasses import dataclass

from specreport.domain.exceptions import InvalidThresholdsError


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        slow_ms: Tests at or above this duration get a yellow annotation.
        very_slow_ms: Tests above this duration get a red annotation.
        line_width: Minimum visible width of a test line.
        margin: Left margin of every line.
        indent_unit: Prepended once per ancestor level.
    """

    slow_ms: int = 1000
    very_slow_ms: int = 3000
    line_width: int = 80
    margin: str = "  "
    indent_unit: str = "\t"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.slow_ms < 0 or self.very_slow_ms < 0 or self.slow_ms > self.very_slow_ms:
            raise InvalidThresholdsError(self.slow_ms, self.very_slow_ms)
        if self.line_width <= 0:
            raise ValueError(f"line_width must be > 0, got {self.line_width}")
