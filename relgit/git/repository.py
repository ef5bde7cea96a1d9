"""Git facade bundling queries, mutations and changelog over one context.

Usage:
    git = Git.open(Path.cwd(), RichConsole(verbose=True), dry_run=True)

    if not await git.query.is_git_repo():
        ...
    await git.ops.stage_all(add_untracked_files=False)
    await git.ops.commit(CommitSpec(message="Release ${version}"))
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from relgit.git.changelog import ChangelogGenerator
from relgit.git.models import GitContext
from relgit.git.mutation import MutationOps
from relgit.git.query import RepositoryQuery
from relgit.git.runner import ShellRunner
from relgit.output.console import ConsoleProtocol

__all__ = ["Git"]


class Git:
    """Entry point to the git layer.

    Attributes:
        ctx: Context shared by the three components
        query: Read-only probes
        ops: State-changing operations
        changelog: Changelog generation
    """

    def __init__(self, ctx: GitContext) -> None:
        self.ctx = ctx
        self.query = RepositoryQuery(ctx)
        self.ops = MutationOps(ctx, self.query)
        self.changelog = ChangelogGenerator(ctx, self.query)

    @classmethod
    def open(cls, cwd: Path, console: ConsoleProtocol, *, dry_run: bool = False) -> Git:
        """Build a Git backed by a ``ShellRunner`` rooted at ``cwd``."""
        runner = ShellRunner(cwd=cwd, console=console, dry_run=dry_run)
        return cls(GitContext(cwd=cwd, runner=runner, console=console))

    def with_variables(self, **variables: str) -> Git:
        """Return a new Git whose template commands see ``variables``."""
        runner = self.ctx.runner.with_variables(**variables)
        return Git(replace(self.ctx, runner=runner))
