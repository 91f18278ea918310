"""Spec (test grouping unit) value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Spec:
    """Named grouping unit owning test cases.

    Attributes:
        qualified_name: Fully-qualified class-like name, e.g. "pkg.mod.MySpec"
    """

    qualified_name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")
