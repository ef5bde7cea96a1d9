"""State-changing git operations.

Failure handling per operation:
    clone, push, stage_all, status   raise (typed)
    commit                           raise GitCommitError, except "nothing to commit"
    stage, reset, tag                warn and continue
"""

from __future__ import annotations

import os
import re
import shlex
from collections.abc import Sequence
from typing import TypeAlias, Union

from relgit.git.errors import GitCloneError, GitCommitError, GitPushError
from relgit.git.models import CommitSpec, GitContext, PushTarget, TagSpec
from relgit.git.outcome import FATAL, FailurePolicy, FailureRule, Outcome, settle
from relgit.git.query import RepositoryQuery

__all__ = ["MutationOps", "split_branch_selector"]

_COMMIT_REF = re.compile(r"#.+$")
_NOTHING_TO_COMMIT = re.compile(r"nothing (added )?to commit")

PathArg: TypeAlias = Union[str, os.PathLike[str]]


def split_branch_selector(repo: str) -> tuple[str, str | None]:
    """Split ``url#branch`` into ``("url", "branch")``."""
    m = _COMMIT_REF.search(repo)
    if not m:
        return repo, None
    return repo[: m.start()], m.group(0)[1:]


def _join_files(files: PathArg | Sequence[PathArg]) -> str:
    if isinstance(files, (str, os.PathLike)):
        items: list[PathArg] = [files]
    else:
        items = list(files)
    return " ".join(shlex.quote(os.fspath(f)) for f in items)


def _command(*parts: str) -> str:
    """Join command parts in order, dropping empty ones."""
    return " ".join(p for p in parts if p)


def _as_literal(text: str) -> str:
    """Escape already-formatted text so ``run_template`` leaves it unchanged."""
    return text.replace("$", "$$")


class MutationOps:
    """Operations that change the repository or its remote."""

    def __init__(self, ctx: GitContext, query: RepositoryQuery | None = None) -> None:
        self._ctx = ctx
        self._query = query or RepositoryQuery(ctx)

    async def clone(self, repo: str, target_dir: PathArg) -> Outcome:
        """Clone ``repo`` (optionally ``url#branch``) as a single-branch checkout.

        Raises:
            GitCloneError: If the clone fails.
        """
        url, branch = split_branch_selector(repo)
        command = _command(
            "git clone",
            url,
            f"-b {branch}" if branch else "",
            "--single-branch",
            shlex.quote(os.fspath(target_dir)),
        )
        result = await self._ctx.runner.run(command)
        rule = FailureRule(
            FailurePolicy.TYPED_FATAL,
            error=GitCloneError,
            fatal_message=f"Unable to clone {repo}",
        )
        return settle(result, rule, self._ctx.console)

    async def stage(self, files: PathArg | Sequence[PathArg]) -> Outcome:
        joined = _join_files(files)
        result = await self._ctx.runner.run(f"git add {joined}")
        rule = FailureRule(FailurePolicy.WARN_AND_CONTINUE, warning=f"Could not stage {joined}")
        return settle(result, rule, self._ctx.console)

    async def stage_all(
        self, base_dir: PathArg = ".", *, add_untracked_files: bool = False
    ) -> Outcome:
        """Stage everything under ``base_dir``.

        Without ``add_untracked_files`` only already-tracked files are updated.
        """
        mode = "--all" if add_untracked_files else "--update"
        result = await self._ctx.runner.run(
            f"git add {shlex.quote(os.fspath(base_dir))} {mode}"
        )
        return settle(result, FATAL, self._ctx.console)

    async def reset(self, files: PathArg | Sequence[PathArg]) -> Outcome:
        """Restore files to their HEAD content."""
        joined = _join_files(files)
        result = await self._ctx.runner.run(f"git checkout HEAD -- {joined}")
        rule = FailureRule(FailurePolicy.WARN_AND_CONTINUE, warning=f"Could not reset {joined}")
        return settle(result, rule, self._ctx.console)

    async def status(self) -> str:
        result = await self._ctx.runner.run(
            "git status --short --untracked-files=no", read_only=True
        )
        return settle(result, FATAL, self._ctx.console).stdout or ""

    async def commit(self, spec: CommitSpec) -> Outcome:
        """Commit staged changes in ``spec.path``.

        An empty commit is not an error: the latest commit gets tagged.

        Raises:
            GitCommitError: On any other failure.
        """
        runner = self._ctx.runner
        message = _as_literal(shlex.quote(runner.format(spec.message)))
        result = await runner.run_template(
            _command("git commit", f"--message={message}", spec.args),
            self._ctx.cwd / spec.path,
        )
        rule = FailureRule(
            FailurePolicy.TYPED_FATAL,
            error=GitCommitError,
            benign=_NOTHING_TO_COMMIT,
            benign_warning="No changes to commit. The latest commit will be tagged.",
        )
        return settle(result, rule, self._ctx.console)

    async def tag(self, spec: TagSpec) -> Outcome:
        """Create an annotated tag; a failure (usually an existing tag) only warns."""
        runner = self._ctx.runner
        name = runner.format(spec.name)
        annotation = _as_literal(shlex.quote(runner.format(spec.annotation)))
        result = await runner.run_template(
            _command(
                "git tag --annotate",
                f"--message={annotation}",
                spec.args,
                _as_literal(shlex.quote(name)),
            )
        )
        rule = FailureRule(
            FailurePolicy.WARN_AND_CONTINUE,
            warning=f'Could not tag. Does tag "{name}" already exist?',
        )
        return settle(result, rule, self._ctx.console)

    async def resolve_push_target(self, push_repo: str = "", *, has_upstream_branch: bool) -> str:
        target = PushTarget(push_repo=push_repo, has_upstream_branch=has_upstream_branch)
        if target.needs_branch_name:
            branch = await self._query.current_branch_name()
            target = PushTarget(push_repo, has_upstream_branch, branch)
        return target.resolve()

    async def push(
        self,
        push_repo: str = "",
        *,
        has_upstream_branch: bool,
        args: str = "",
    ) -> Outcome:
        """Push commits and their tags.

        Arguments keep a fixed order: ``--follow-tags``, ``args``, target.

        Raises:
            GitPushError: On any failure.
        """
        target = await self.resolve_push_target(push_repo, has_upstream_branch=has_upstream_branch)
        result = await self._ctx.runner.run(_command("git push --follow-tags", args, target))
        rule = FailureRule(FailurePolicy.TYPED_FATAL, error=GitPushError)
        return settle(result, rule, self._ctx.console)
