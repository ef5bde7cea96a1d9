"""Repository commands: info and clone."""

from __future__ import annotations

from pathlib import Path

import typer

from relgit.cli.commands._helpers import exit_with_code, run_or_exit
from relgit.cli.context import build_context
from relgit.core.errors import ErrorCode
from relgit.git.repository import Git
from relgit.output.console import Style


async def _collect_info(git: Git) -> list[tuple[str, str]] | None:
    query = git.query
    if not await query.is_git_repo():
        return None

    branch = await query.current_branch_name()
    return [
        ("root", str(await query.root_dir())),
        ("branch", branch or "(detached)"),
        ("upstream", "yes" if await query.has_upstream_branch() else "no"),
        ("remote", await query.remote_url() or "(none)"),
        ("latest tag", await query.latest_tag() or "(none)"),
        ("working dir", "clean" if await query.is_working_dir_clean() else "dirty"),
    ]


def info(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show git commands"),
) -> None:
    """Show repository state as seen by a release."""
    ctx = build_context(verbose=verbose)
    rows = run_or_exit(_collect_info(ctx.git), ctx)
    if rows is None:
        ctx.console.error(f"Not a git repository: {ctx.cwd}")
        exit_with_code(int(ErrorCode.ENV_ERROR))

    ctx.console.header("Repository")
    for label, value in rows:
        ctx.console.print(f"  {label:<12} {value}")

    status = run_or_exit(ctx.git.ops.status(), ctx)
    if status:
        ctx.console.print("")
        ctx.console.print(status, Style.DIM)


def clone(
    repo: str = typer.Argument(..., help="Repository URL, optionally with #branch"),
    directory: Path = typer.Argument(..., help="Target directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show git commands"),
) -> None:
    """Clone a repository as a single-branch checkout."""
    ctx = build_context(verbose=verbose)
    run_or_exit(ctx.git.ops.clone(repo, directory), ctx)
    ctx.console.success(f"cloned {repo} into {directory}")
