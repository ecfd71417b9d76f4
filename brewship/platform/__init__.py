"""Platform layer: subprocess execution."""

from .process import ProbeOutput, ProcessError, run, run_combined

__all__ = ["ProbeOutput", "ProcessError", "run", "run_combined"]
