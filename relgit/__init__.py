"""Release-oriented git orchestration."""

__version__ = "0.3.0"
