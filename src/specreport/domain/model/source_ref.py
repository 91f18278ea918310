"""Source reference value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceRef:
    """Where a test case is declared.

    Attributes:
        file_name: Source file name (as reported by the engine)
        line_number: Line number (1-based, must be > 0)
    """

    file_name: str
    line_number: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file_name:
            raise ValueError("file_name must not be empty")
        if self.line_number <= 0:
            raise ValueError(f"line_number must be > 0, got {self.line_number}")

    def __str__(self) -> str:
        """Format as file:line."""
        return f"{self.file_name}:{self.line_number}"
