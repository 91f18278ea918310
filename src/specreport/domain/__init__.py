"""specreport domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, datetime, traceback, collections.abc
"""

from specreport.domain.exceptions import (
    InvalidDescriptionError,
    InvalidThresholdsError,
    SpecReportError,
)
from specreport.domain.model import (
    Cause,
    Description,
    ReporterConfig,
    SourceRef,
    Spec,
    TestCase,
    TestResult,
    TestStatus,
    TestType,
)
from specreport.domain.ports import ConsoleWriter, EngineListener, TermColors

__all__ = [
    # Exceptions
    "SpecReportError",
    "InvalidDescriptionError",
    "InvalidThresholdsError",
    # Enums
    "TestStatus",
    "TestType",
    # Value objects
    "Cause",
    "Description",
    "SourceRef",
    "ReporterConfig",
    # Entities
    "Spec",
    "TestCase",
    "TestResult",
    # Ports
    "ConsoleWriter",
    "EngineListener",
    "TermColors",
]
