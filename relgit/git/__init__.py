"""Git operations module.

This module orchestrates the external ``git`` binary for releases:
- RepositoryQuery: read-only probes (branch, upstream, tags, cleanliness)
- MutationOps: stage, commit, tag, push, clone
- ChangelogGenerator: changelog from commit history
- Git: facade bundling the three over one GitContext

Usage:
    from relgit.git import Git, TagSpec

    git = Git.open(Path.cwd(), console)
    if await git.query.has_upstream_branch():
        ...
    await git.ops.tag(TagSpec(name="v1.2.0", annotation="Release 1.2.0"))
"""

from relgit.git.changelog import REV_RANGE, ChangelogGenerator
from relgit.git.errors import (
    CreateChangelogError,
    GitCloneError,
    GitCommandError,
    GitCommitError,
    GitError,
    GitPushError,
    NotARepositoryError,
    NoUpstreamError,
    WorkingDirNotCleanError,
)
from relgit.git.models import (
    ChangelogSpec,
    CommitSpec,
    GitContext,
    PushTarget,
    RepoRef,
    TagSpec,
    is_remote_name,
)
from relgit.git.mutation import MutationOps, split_branch_selector
from relgit.git.outcome import FailurePolicy, FailureRule, Outcome, OutcomeKind, settle
from relgit.git.query import RepositoryQuery
from relgit.git.repository import Git
from relgit.git.runner import CommandRunner, ShellRunner

__all__ = [
    # Facade
    "Git",
    # Components
    "ChangelogGenerator",
    "MutationOps",
    "RepositoryQuery",
    "REV_RANGE",
    "split_branch_selector",
    # Runner
    "CommandRunner",
    "ShellRunner",
    # Models
    "ChangelogSpec",
    "CommitSpec",
    "GitContext",
    "PushTarget",
    "RepoRef",
    "TagSpec",
    "is_remote_name",
    # Outcomes
    "FailurePolicy",
    "FailureRule",
    "Outcome",
    "OutcomeKind",
    "settle",
    # Errors
    "CreateChangelogError",
    "GitCloneError",
    "GitCommandError",
    "GitCommitError",
    "GitError",
    "GitPushError",
    "NotARepositoryError",
    "NoUpstreamError",
    "WorkingDirNotCleanError",
]
