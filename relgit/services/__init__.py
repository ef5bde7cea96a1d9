"""Services built on the git layer."""

from .release import ReleaseReport, ReleaseService, RepoState

__all__ = ["ReleaseReport", "ReleaseService", "RepoState"]
