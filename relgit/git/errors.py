"""Typed errors raised by the git layer.

Only fatal outcomes become exceptions. Expected absence (no upstream, no
tag) is a ``False``/``None`` result and recoverable failures are warnings.
"""

from __future__ import annotations

from relgit.platform.process import ProcessError

__all__ = [
    "GitError",
    "GitCommandError",
    "GitCloneError",
    "GitCommitError",
    "GitPushError",
    "CreateChangelogError",
    "NotARepositoryError",
    "WorkingDirNotCleanError",
    "NoUpstreamError",
]


class GitError(Exception):
    """Base class for every error raised by relgit."""

    hint: str | None = None


class GitCommandError(GitError):
    """A git command failed and the failure is fatal."""

    def __init__(self, failure: ProcessError, message: str | None = None) -> None:
        self.failure = failure
        if message is None:
            detail = failure.output
            message = str(failure) if not detail else f"{failure}\n{detail}"
        super().__init__(message)

    @property
    def command(self) -> str:
        return self.failure.command

    @property
    def returncode(self) -> int:
        return self.failure.returncode


class GitCloneError(GitCommandError):
    pass


class GitCommitError(GitCommandError):
    pass


class GitPushError(GitCommandError):
    hint = "Check the push target and that the remote accepts the branch."


class CreateChangelogError(GitCommandError):
    """The changelog command failed; ``command`` is the command that was run."""

    def __init__(self, failure: ProcessError) -> None:
        super().__init__(failure, f"Could not create changelog ({failure.command})")


class NotARepositoryError(GitError):
    hint = "Run relgit from inside a git working tree."

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Not a git repository: {path}")


class WorkingDirNotCleanError(GitError):
    hint = "Commit or stash your changes, or set require_clean_working_dir = false."

    def __init__(self) -> None:
        super().__init__("Working dir must be clean.")


class NoUpstreamError(GitError):
    hint = "Push the branch with an upstream first, or set require_upstream = false."

    def __init__(self, branch: str | None) -> None:
        self.branch = branch
        super().__init__(f'No upstream configured for current branch "{branch or "HEAD"}".')
