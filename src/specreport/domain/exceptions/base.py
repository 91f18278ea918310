"""Base exceptions for specreport domain."""


class SpecReportError(Exception):
    """Root exception for all specreport errors.

    All domain exceptions inherit from this.
    Allows catching all specreport-specific errors.
    """
