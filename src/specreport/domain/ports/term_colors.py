"""Terminal colors port.

The reporter never embeds raw control codes. Every colored segment goes
through this Protocol so a plain-text implementation can be swapped in for
non-terminal output and for tests asserting on uncolored text.
"""

from __future__ import annotations

from typing import Protocol


class TermColors(Protocol):
    """One method per semantic color. Each wraps text for terminal display."""

    @property
    def enabled(self) -> bool:
        """True if styling is actually emitted."""
        ...

    def bright_green(self, text: str) -> str:
        """Success."""
        ...

    def bright_red(self, text: str) -> str:
        """Failure, very slow."""
        ...

    def red(self, text: str) -> str:
        """Spec-level failure, error type, stack frames."""
        ...

    def gray(self, text: str) -> str:
        """Ignored."""
        ...

    def bright_yellow(self, text: str) -> str:
        """Slow."""
        ...

    def bright_white(self, text: str) -> str:
        """Headers."""
        ...
