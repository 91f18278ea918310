"""specreport - mocha-style console reporter for test lifecycle events."""

__version__ = "0.1.0"

from specreport.application.reporters.mocha import MochaConsoleWriter
from specreport.domain.model.config import ReporterConfig

__all__ = ["MochaConsoleWriter", "ReporterConfig", "__version__"]
