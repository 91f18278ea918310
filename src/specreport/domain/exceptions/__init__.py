"""Domain exceptions."""

from specreport.domain.exceptions.base import SpecReportError
from specreport.domain.exceptions.validation import (
    InvalidDescriptionError,
    InvalidThresholdsError,
)

__all__ = [
    "SpecReportError",
    "InvalidDescriptionError",
    "InvalidThresholdsError",
]
