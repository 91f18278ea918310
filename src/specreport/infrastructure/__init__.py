"""Infrastructure adapters."""

from specreport.infrastructure.colors import PlainTermColors, RichTermColors

__all__ = ["PlainTermColors", "RichTermColors"]
