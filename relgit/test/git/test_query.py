"""Tests for git/query.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from relgit.git.errors import GitCommandError
from relgit.git.repository import Git
from relgit.output.console import MockConsole
from relgit.test._fakes import FakeRunner

UPSTREAM = "git rev-parse --abbrev-ref --symbolic-full-name @{u}"
BRANCH = "git rev-parse --abbrev-ref HEAD"


class TestProbes:
    @pytest.mark.asyncio
    async def test_every_probe_is_read_only(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git rev-parse --show-toplevel", str(git.ctx.cwd))
        await git.query.is_git_repo()
        await git.query.root_dir()
        await git.query.is_at_repo_root()
        await git.query.has_upstream_branch()
        await git.query.current_branch_name()
        await git.query.tag_exists("1.0.0")
        await git.query.remote_url()
        await git.query.is_working_dir_clean()
        await git.query.latest_tag()

        assert runner.calls
        assert all(call.read_only for call in runner.calls)

    @pytest.mark.asyncio
    async def test_is_git_repo(self, git: Git, runner: FakeRunner) -> None:
        assert await git.query.is_git_repo() is True
        runner.fail("git rev-parse --git-dir", stderr="fatal: not a git repository", returncode=128)
        assert await git.query.is_git_repo() is False

    @pytest.mark.asyncio
    async def test_probe_failures_are_silent(
        self, git: Git, runner: FakeRunner, console: MockConsole
    ) -> None:
        runner.fail("git", stderr="fatal")
        assert await git.query.has_upstream_branch() is False
        assert await git.query.current_branch_name() is None
        assert await git.query.tag_exists("nope") is False
        assert await git.query.remote_url("origin") is None
        assert await git.query.is_working_dir_clean() is False
        assert await git.query.latest_tag() is None
        assert console.outputs == []


class TestRootDir:
    @pytest.mark.asyncio
    async def test_returns_path(self, git: Git, runner: FakeRunner, tmp_path: Path) -> None:
        runner.succeed("git rev-parse --show-toplevel", str(tmp_path))
        assert await git.query.root_dir() == tmp_path

    @pytest.mark.asyncio
    async def test_failure_raises(self, git: Git, runner: FakeRunner) -> None:
        runner.fail("git rev-parse --show-toplevel", stderr="fatal: not a git repository")
        with pytest.raises(GitCommandError):
            await git.query.root_dir()

    @pytest.mark.asyncio
    async def test_is_at_repo_root(self, git: Git, runner: FakeRunner, tmp_path: Path) -> None:
        runner.succeed("git rev-parse --show-toplevel", str(tmp_path))
        assert await git.query.is_at_repo_root() is True

    @pytest.mark.asyncio
    async def test_empty_output_raises(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git rev-parse --show-toplevel", "")
        with pytest.raises(GitCommandError, match="printed no directory"):
            await git.query.root_dir()
        with pytest.raises(GitCommandError):
            await git.query.is_at_repo_root()

    @pytest.mark.asyncio
    async def test_subdirectory_is_not_root(
        self, git: Git, runner: FakeRunner, tmp_path: Path
    ) -> None:
        runner.succeed("git rev-parse --show-toplevel", str(tmp_path.parent))
        assert await git.query.is_at_repo_root() is False


class TestBranch:
    @pytest.mark.asyncio
    async def test_branch_name(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed(BRANCH, "feature/login")
        assert await git.query.current_branch_name() == "feature/login"

    @pytest.mark.asyncio
    async def test_detached_head_is_none(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed(BRANCH, "HEAD")
        assert await git.query.current_branch_name() is None

    @pytest.mark.asyncio
    async def test_has_upstream(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed(UPSTREAM, "origin/main")
        assert await git.query.has_upstream_branch() is True
        runner.fail(UPSTREAM, stderr="fatal: no upstream configured for branch 'main'")
        assert await git.query.has_upstream_branch() is False


class TestTags:
    @pytest.mark.asyncio
    async def test_tag_exists_uses_exact_ref(self, git: Git, runner: FakeRunner) -> None:
        assert await git.query.tag_exists("v1.2.3") is True
        assert runner.commands == [
            'git show-ref --tags --quiet --verify -- "refs/tags/v1.2.3"'
        ]

    @pytest.mark.asyncio
    async def test_missing_tag_is_repeatably_false(self, git: Git, runner: FakeRunner) -> None:
        runner.fail("git show-ref", returncode=1)
        results = [await git.query.tag_exists("9.9.9") for _ in range(3)]
        assert results == [False, False, False]
        assert len(runner.calls) == 3

    @pytest.mark.asyncio
    async def test_latest_tag_strips_leading_v(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git describe --tags --abbrev=0", "v1.2.3")
        assert await git.query.latest_tag() == "1.2.3"

    @pytest.mark.asyncio
    async def test_latest_tag_without_prefix(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git describe --tags --abbrev=0", "2.0.0-rc.1")
        assert await git.query.latest_tag() == "2.0.0-rc.1"

    @pytest.mark.asyncio
    async def test_latest_tag_strips_one_v_only(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git describe --tags --abbrev=0", "vv3")
        assert await git.query.latest_tag() == "v3"

    @pytest.mark.asyncio
    async def test_no_tags(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git describe --tags --abbrev=0", "")
        assert await git.query.latest_tag() is None


class TestRemoteUrl:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "url",
        ["https://github.com/acme/widgets.git", "git@github.com:acme/widgets.git", "./mirror"],
    )
    async def test_url_returned_verbatim(self, git: Git, runner: FakeRunner, url: str) -> None:
        assert await git.query.remote_url(url) == url
        assert runner.calls == []

    @pytest.mark.asyncio
    async def test_remote_name_is_resolved(self, git: Git, runner: FakeRunner) -> None:
        runner.succeed("git config --get remote.origin.url", "git@github.com:acme/widgets.git")
        assert await git.query.remote_url() == "git@github.com:acme/widgets.git"

    @pytest.mark.asyncio
    async def test_unconfigured_remote_is_none(self, git: Git, runner: FakeRunner) -> None:
        runner.fail("git config --get remote.mirror.url", returncode=1)
        assert await git.query.remote_url("mirror") is None


class TestWorkingDir:
    @pytest.mark.asyncio
    async def test_clean(self, git: Git, runner: FakeRunner) -> None:
        assert await git.query.is_working_dir_clean() is True
        assert runner.commands == ["git diff-index --name-only HEAD --exit-code"]

    @pytest.mark.asyncio
    async def test_dirty(self, git: Git, runner: FakeRunner) -> None:
        runner.fail("git diff-index", stdout="src/app.py", returncode=1)
        assert await git.query.is_working_dir_clean() is False
