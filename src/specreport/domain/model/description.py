"""Hierarchical test description value object."""

from __future__ import annotations

from dataclasses import dataclass

from specreport.domain.exceptions import InvalidDescriptionError

FULL_NAME_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class Description:
    """Path of names from spec root to leaf.

    Stable identity key for tests and containers. Depth (number of
    ancestors) drives indentation.

    Attributes:
        names: Non-empty path, root first
    """

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.names, tuple):
            raise TypeError(f"names must be tuple, got {type(self.names).__name__}")
        if not self.names:
            raise InvalidDescriptionError(self.names, "path must not be empty")
        if any(not name for name in self.names):
            raise InvalidDescriptionError(self.names, "names must not be empty")

    @property
    def name(self) -> str:
        """Leaf name."""
        return self.names[-1]

    @property
    def depth(self) -> int:
        """Number of ancestors."""
        return len(self.names) - 1

    def full_name(self) -> str:
        """Fully-qualified display name."""
        return FULL_NAME_SEPARATOR.join(self.names)

    def __str__(self) -> str:
        """Format as full name."""
        return self.full_name()
