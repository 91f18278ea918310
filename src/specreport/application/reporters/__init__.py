"""Reporters: mocha-style console output for test runs.

Output is built as lines by pure renderers; MochaConsoleWriter decides
destination and serializes hook handling.
"""

from specreport.application.reporters.line_formatter import LineFormatter
from specreport.application.reporters.mocha import MochaConsoleWriter
from specreport.application.reporters.spec_block import SpecBlockRenderer
from specreport.application.reporters.summary import SummaryRenderer
from specreport.application.reporters.theme import Color, Glyphs, Symbol, symbol_for

__all__ = [
    "Color",
    "Glyphs",
    "LineFormatter",
    "MochaConsoleWriter",
    "SpecBlockRenderer",
    "SummaryRenderer",
    "Symbol",
    "symbol_for",
]
