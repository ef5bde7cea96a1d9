"""Tests for relgit.output.errors module."""

from __future__ import annotations

import pytest

from relgit.core.errors import ErrorCode
from relgit.git.errors import (
    CreateChangelogError,
    GitCloneError,
    GitCommitError,
    GitError,
    GitPushError,
    NotARepositoryError,
    NoUpstreamError,
    WorkingDirNotCleanError,
)
from relgit.output.console import MockConsole, Style
from relgit.output.errors import git_error_exit_code, print_git_error
from relgit.platform.process import ProcessError


def _failure(command: str, stderr: str = "") -> ProcessError:
    return ProcessError(command=command, returncode=1, stdout="", stderr=stderr)


class TestPrintGitError:
    def test_command_error_shows_output_and_hint(self) -> None:
        console = MockConsole()
        error = GitPushError(_failure("git push --follow-tags", "! [rejected] main"))

        print_git_error(error, console)

        assert console.messages[0] == "error: git push --follow-tags failed (exit 1)"
        assert console.outputs[1].message == "! [rejected] main"
        assert console.outputs[1].style == Style.DIM
        assert console.messages[-1].startswith("hint: ")

    def test_command_error_without_output(self) -> None:
        console = MockConsole()
        print_git_error(GitCommitError(_failure("git commit")), console)
        assert console.messages == ["error: git commit failed (exit 1)"]

    def test_changelog_error_names_command(self) -> None:
        console = MockConsole()
        print_git_error(CreateChangelogError(_failure("auto-changelog")), console)
        assert console.messages == ["error: Could not create changelog (auto-changelog)"]

    def test_clone_error(self) -> None:
        console = MockConsole()
        print_git_error(GitCloneError(_failure("git clone x --single-branch y")), console)
        assert console.messages == ["error: git clone x --single-branch y failed"]

    def test_precondition_error_with_hint(self) -> None:
        console = MockConsole()
        print_git_error(NoUpstreamError("main"), console)
        assert console.messages[0] == 'error: No upstream configured for current branch "main".'
        assert "require_upstream" in console.messages[1]


class TestExitCodes:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (NotARepositoryError("/tmp"), ErrorCode.ENV_ERROR),
            (WorkingDirNotCleanError(), ErrorCode.PRECONDITION_ERROR),
            (NoUpstreamError(None), ErrorCode.PRECONDITION_ERROR),
            (GitPushError(_failure("git push")), ErrorCode.GIT_ERROR),
            (CreateChangelogError(_failure("x")), ErrorCode.GIT_ERROR),
            (GitError("other"), ErrorCode.USER_ERROR),
        ],
    )
    def test_mapping(self, error: GitError, code: ErrorCode) -> None:
        assert git_error_exit_code(error) == code


class TestErrorMessages:
    def test_detached_head_upstream_message(self) -> None:
        assert str(NoUpstreamError(None)) == 'No upstream configured for current branch "HEAD".'

    def test_working_dir_message(self) -> None:
        assert str(WorkingDirNotCleanError()) == "Working dir must be clean."

    def test_command_error_message_includes_output(self) -> None:
        error = GitCommitError(_failure("git commit", "hook failed"))
        assert str(error) == "git commit failed (exit 1)\nhook failed"
        assert error.command == "git commit"
