"""Domain model: value objects and entities of a test run."""

from specreport.domain.model.cause import Cause
from specreport.domain.model.config import ReporterConfig
from specreport.domain.model.description import Description
from specreport.domain.model.enums import TestStatus, TestType
from specreport.domain.model.source_ref import SourceRef
from specreport.domain.model.spec import Spec
from specreport.domain.model.test_case import TestCase
from specreport.domain.model.test_result import TestResult

__all__ = [
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
]
