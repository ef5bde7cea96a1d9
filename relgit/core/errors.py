"""Exit codes for the relgit CLI.

The git layer never terminates the process; the CLI maps the typed errors
it raises onto these codes.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (bad arguments)
    - 2: Environment error (not a repository, git missing, bad config)
    - 3: Git error (a clone, commit, push or changelog command failed)
    - 4: Precondition error (dirty working dir, no upstream branch)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    GIT_ERROR = 3
    PRECONDITION_ERROR = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
