"""Read-only repository probes.

Every probe runs with ``read_only=True``, so it executes even in dry-run
mode and never changes repository state. Absence (not a repository, no
upstream, missing tag) is an answer, not an error.
"""

from __future__ import annotations

from pathlib import Path

from relgit.git.errors import GitCommandError
from relgit.git.models import DEFAULT_REMOTE, GitContext, is_remote_name
from relgit.git.outcome import FATAL, SILENT, Outcome, settle
from relgit.platform.process import ProcessError

__all__ = ["RepositoryQuery"]


class RepositoryQuery:
    """Read-only questions about the repository at ``ctx.cwd``."""

    def __init__(self, ctx: GitContext) -> None:
        self._ctx = ctx

    async def _probe(self, command: str) -> Outcome:
        result = await self._ctx.runner.run(command, read_only=True)
        return settle(result, SILENT, self._ctx.console)

    async def is_git_repo(self) -> bool:
        outcome = await self._probe("git rev-parse --git-dir")
        return outcome.succeeded

    async def root_dir(self) -> Path:
        """Absolute top-level directory of the working tree.

        Raises:
            GitCommandError: If git cannot tell (e.g. not a repository) or
                prints no directory.
        """
        command = "git rev-parse --show-toplevel"
        result = await self._ctx.runner.run(command, read_only=True)
        top = settle(result, FATAL, self._ctx.console).stdout
        if not top:
            failure = ProcessError(command=command, returncode=0, stdout="", stderr="")
            raise GitCommandError(failure, f"{command} printed no directory")
        return self._ctx.cwd / top

    async def is_at_repo_root(self) -> bool:
        root = await self.root_dir()
        return self._ctx.cwd.resolve() == root.resolve()

    async def has_upstream_branch(self) -> bool:
        outcome = await self._probe("git rev-parse --abbrev-ref --symbolic-full-name @{u}")
        return outcome.succeeded

    async def current_branch_name(self) -> str | None:
        """Current branch, or None for a detached HEAD or on failure."""
        outcome = await self._probe("git rev-parse --abbrev-ref HEAD")
        branch = outcome.stdout
        if not branch or branch == "HEAD":
            return None
        return branch

    async def tag_exists(self, tag_name: str) -> bool:
        outcome = await self._probe(
            f'git show-ref --tags --quiet --verify -- "refs/tags/{tag_name}"'
        )
        return outcome.succeeded

    async def remote_url(self, remote_name_or_url: str = DEFAULT_REMOTE) -> str | None:
        """Resolve a remote name to its URL; a URL is returned verbatim."""
        if not is_remote_name(remote_name_or_url):
            return remote_name_or_url
        outcome = await self._probe(f"git config --get remote.{remote_name_or_url}.url")
        return outcome.stdout or None

    async def is_working_dir_clean(self) -> bool:
        """True when tracked files match HEAD (untracked files are ignored)."""
        outcome = await self._probe("git diff-index --name-only HEAD --exit-code")
        return outcome.succeeded

    async def latest_tag(self) -> str | None:
        """Most recent reachable tag, without a leading ``v``."""
        outcome = await self._probe("git describe --tags --abbrev=0")
        if not outcome.stdout:
            return None
        return outcome.stdout.removeprefix("v") or None
