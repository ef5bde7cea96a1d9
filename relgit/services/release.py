"""Git side of a release: preflight checks, then stage, commit, tag, push.

The service only sequences git operations; version bumping and publishing
belong to the caller. Each step is awaited before the next one starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from relgit.core.config import GitConfig
from relgit.git.errors import NotARepositoryError, NoUpstreamError, WorkingDirNotCleanError
from relgit.git.models import ChangelogSpec, CommitSpec, TagSpec
from relgit.git.outcome import Outcome
from relgit.git.repository import Git
from relgit.git.template import format_template

__all__ = ["ReleaseReport", "ReleaseService", "RepoState"]


@dataclass(frozen=True, slots=True)
class RepoState:
    """Snapshot of the repository taken during preflight."""

    root: Path
    branch: str | None
    has_upstream: bool
    remote_url: str | None
    latest_tag: str | None
    is_clean: bool


def _no_warnings() -> list[str]:
    return []


@dataclass
class ReleaseReport:
    """What a release did.

    Attributes:
        version: Released version
        tag_name: Formatted tag name
        committed: A commit step ran (it may have found nothing to commit)
        tagged: A tag was created without warnings
        pushed: The push step ran
        warnings: Every warning raised along the way
    """

    version: str
    tag_name: str
    committed: bool = False
    tagged: bool = False
    pushed: bool = False
    warnings: list[str] = field(default_factory=_no_warnings)

    def record(self, outcome: Outcome) -> None:
        if outcome.warning:
            self.warnings.append(outcome.warning)


class ReleaseService:
    """Runs the git steps of a release with the configured templates."""

    def __init__(self, git: Git, config: GitConfig) -> None:
        self._git = git
        self._config = config

    async def preflight(self) -> RepoState:
        """Check the repository can be released from.

        Raises:
            NotARepositoryError: Not inside a git working tree.
            WorkingDirNotCleanError: Tracked files differ from HEAD and a clean
                working dir is required.
            NoUpstreamError: No upstream branch and one is required.
        """
        query = self._git.query
        if not await query.is_git_repo():
            raise NotARepositoryError(str(self._git.ctx.cwd))

        is_clean = await query.is_working_dir_clean()
        if self._config.require_clean_working_dir and not is_clean:
            raise WorkingDirNotCleanError()

        branch = await query.current_branch_name()
        has_upstream = await query.has_upstream_branch()
        if self._config.require_upstream and not has_upstream:
            raise NoUpstreamError(branch)

        return RepoState(
            root=await query.root_dir(),
            branch=branch,
            has_upstream=has_upstream,
            remote_url=await query.remote_url(self._config.push_repo or "origin"),
            latest_tag=await query.latest_tag(),
            is_clean=is_clean,
        )

    async def changelog(self, latest_version: str | None) -> str | None:
        spec = ChangelogSpec(
            command=self._config.changelog,
            tag_name=self._config.tag_name,
            latest_version=latest_version,
        )
        return await self._git.changelog.get_changelog(spec)

    async def release(self, version: str, latest_version: str | None = None) -> ReleaseReport:
        """Commit, tag and push ``version``.

        Raises:
            GitCommitError: The commit failed for a reason other than an
                empty change set.
            GitPushError: The push failed.
        """
        cfg = self._config
        tag_name = format_template(
            cfg.tag_name, {"version": version, "latestVersion": latest_version or ""}
        )
        git = self._git.with_variables(
            version=version,
            latestVersion=latest_version or "",
            tagName=tag_name,
        )
        report = ReleaseReport(version=version, tag_name=tag_name)

        if cfg.commit:
            await git.ops.stage_all(add_untracked_files=cfg.add_untracked_files)
            report.record(
                await git.ops.commit(CommitSpec(message=cfg.commit_message, args=cfg.commit_args))
            )
            report.committed = True

        if cfg.tag:
            outcome = await git.ops.tag(
                TagSpec(name=cfg.tag_name, annotation=cfg.tag_annotation, args=cfg.tag_args)
            )
            report.record(outcome)
            report.tagged = outcome.succeeded

        if cfg.push:
            has_upstream = await git.query.has_upstream_branch()
            await git.ops.push(cfg.push_repo, has_upstream_branch=has_upstream, args=cfg.push_args)
            report.pushed = True

        return report
