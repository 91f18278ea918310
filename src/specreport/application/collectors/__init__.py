"""Collectors: run state accumulated from engine events."""

from specreport.application.collectors.run_state import RunSnapshot, RunState

__all__ = ["RunSnapshot", "RunState"]
