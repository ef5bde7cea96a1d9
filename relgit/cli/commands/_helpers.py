"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

import typer

from relgit.git.errors import GitError
from relgit.output.errors import git_error_exit_code, print_git_error

if TYPE_CHECKING:
    from relgit.cli.context import CLIContext

T = TypeVar("T")


def run_or_exit(coro: Coroutine[Any, Any, T], ctx: CLIContext) -> T:
    """Run a git coroutine, turning a GitError into a printed error and exit code.

    This is the only place git layer errors become process termination.
    """
    try:
        return asyncio.run(coro)
    except GitError as e:
        print_git_error(e, ctx.console)
        exit_with_code(git_error_exit_code(e))


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
