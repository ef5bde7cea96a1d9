"""Platform layer: process execution."""

from .process import ProcessError, run_shell

__all__ = ["ProcessError", "run_shell"]
