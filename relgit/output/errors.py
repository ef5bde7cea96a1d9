"""Error presentation utilities.

Centralized formatting and exit code mapping for errors raised by the git
layer, so every CLI command reports them the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relgit.core.errors import ErrorCode
from relgit.git.errors import (
    CreateChangelogError,
    GitCloneError,
    GitCommandError,
    GitError,
    NotARepositoryError,
    NoUpstreamError,
    WorkingDirNotCleanError,
)
from relgit.output.console import Style

if TYPE_CHECKING:
    from relgit.output.console import ConsoleProtocol

__all__ = ["print_git_error", "git_error_exit_code"]


def print_git_error(error: GitError, console: ConsoleProtocol) -> None:
    """Print a git layer error with its hint and captured output."""
    match error:
        case CreateChangelogError(command=command):
            console.error(f"Could not create changelog ({command})")
        case GitCloneError(command=command):
            # The repo name was already reported when the clone failed.
            console.error(f"{command} failed")
        case GitCommandError(failure=failure):
            console.error(str(failure))
            if failure.output:
                console.print(failure.output, Style.DIM)
        case _:
            console.error(str(error))

    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def git_error_exit_code(error: GitError) -> int:
    """Get exit code for a git layer error."""
    match error:
        case NotARepositoryError():
            return int(ErrorCode.ENV_ERROR)
        case WorkingDirNotCleanError() | NoUpstreamError():
            return int(ErrorCode.PRECONDITION_ERROR)
        case GitCommandError():
            return int(ErrorCode.GIT_ERROR)
    return int(ErrorCode.USER_ERROR)
