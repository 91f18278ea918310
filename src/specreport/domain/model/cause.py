"""Failure cause value object."""

from __future__ import annotations

import traceback
from dataclasses import dataclass

UNKNOWN_ERROR_TYPE = "Error"


@dataclass(frozen=True, slots=True)
class Cause:
    """Diagnostic payload attached to a failing outcome.

    Attributes:
        message: Optional human readable message
        stack_trace: Frames, outermost first. May be empty.
        error_type: Type/category name of the underlying error
    """

    message: str | None = None
    stack_trace: tuple[str, ...] = ()
    error_type: str = UNKNOWN_ERROR_TYPE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.stack_trace, tuple):
            raise TypeError(f"stack_trace must be tuple, got {type(self.stack_trace).__name__}")
        if not self.error_type:
            raise ValueError("error_type must not be empty")

    @classmethod
    def from_exception(cls, exc: BaseException) -> Cause:
        """Capture message, type and traceback frames of an exception.

        Args:
            exc: Raised (or constructed) exception.

        Returns:
            Cause with one stack frame string per traceback entry.
        """
        frames = tuple(
            f'File "{frame.filename}", line {frame.lineno}, in {frame.name}'
            for frame in traceback.extract_tb(exc.__traceback__)
        )
        message = str(exc) or None
        error_type = f"{type(exc).__module__}.{type(exc).__qualname__}"
        if type(exc).__module__ == "builtins":
            error_type = type(exc).__qualname__
        return cls(message=message, stack_trace=frames, error_type=error_type)
