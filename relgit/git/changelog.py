"""Changelog generation from commit history."""

from __future__ import annotations

import re

from relgit.git.errors import CreateChangelogError
from relgit.git.models import ChangelogSpec, GitContext
from relgit.git.outcome import FailurePolicy, FailureRule, settle
from relgit.git.query import RepositoryQuery
from relgit.git.template import format_template

__all__ = ["REV_RANGE", "ChangelogGenerator"]

REV_RANGE = "[REV_RANGE]"

_GIT_LOG = re.compile(r"^.?git log")
_CHANGELOG_FAILED = FailureRule(FailurePolicy.TYPED_FATAL, error=CreateChangelogError)


class ChangelogGenerator:
    """Runs the configured changelog command.

    ``[REV_RANGE]`` in the command is replaced by ``<latest tag>...HEAD``
    when that tag exists, or by nothing (full history) when it does not.
    """

    def __init__(self, ctx: GitContext, query: RepositoryQuery | None = None) -> None:
        self._ctx = ctx
        self._query = query or RepositoryQuery(ctx)

    async def get_changelog(self, spec: ChangelogSpec) -> str | None:
        """Return the changelog text, or None when there is nothing to run.

        Changelogs are only generated from the repository root.

        Raises:
            CreateChangelogError: If the command fails.
        """
        command = spec.command
        if not command or not await self._query.is_at_repo_root():
            return None

        if REV_RANGE in command:
            latest_tag = format_template(spec.tag_name, {"version": spec.latest_version or ""})
            has_tag = await self._query.tag_exists(latest_tag)
            rev_range = f"{latest_tag}...HEAD" if has_tag else ""
            return await self.run_changelog_command(command.replace(REV_RANGE, rev_range, 1))
        if _GIT_LOG.match(command):
            return await self.run_changelog_command(command)
        return await self.run_changelog_command(self._ctx.runner.format(command))

    async def run_changelog_command(self, command: str) -> str:
        result = await self._ctx.runner.run(command, read_only=True)
        outcome = settle(result, _CHANGELOG_FAILED, self._ctx.console)

        if self._ctx.verbose:
            self._ctx.console.newline()
        return outcome.stdout or ""
