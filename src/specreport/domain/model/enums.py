"""Domain enumerations."""

from enum import Enum, auto


class TestStatus(Enum):
    """Outcome of a single test case."""

    __test__ = False  # not a pytest test class

    SUCCESS = auto()
    FAILURE = auto()  # assertion failed
    ERROR = auto()  # unexpected exception
    IGNORED = auto()

    @property
    def is_failed(self) -> bool:
        """FAILURE and ERROR are both reported as failures."""
        return self in (TestStatus.FAILURE, TestStatus.ERROR)


class TestType(Enum):
    """Kind of node in the test tree.

    Only TEST nodes carry a meaningful duration annotation.
    """

    __test__ = False

    TEST = auto()
    CONTAINER = auto()
