"""Domain ports (interfaces/protocols)."""

from specreport.domain.ports.listener import ConsoleWriter, EngineListener
from specreport.domain.ports.term_colors import TermColors

__all__ = [
    "ConsoleWriter",
    "EngineListener",
    "TermColors",
]
