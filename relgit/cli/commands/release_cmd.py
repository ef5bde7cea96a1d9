"""Release commands: changelog and release."""

from __future__ import annotations

from dataclasses import replace

import typer

from relgit.cli.commands._helpers import run_or_exit
from relgit.cli.context import build_context
from relgit.output.console import ConsoleProtocol, Style
from relgit.services.release import ReleaseReport, ReleaseService


def changelog(
    latest_version: str | None = typer.Option(
        None,
        "--latest-version",
        help="Version of the previous release (defaults to the latest tag)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show git commands"),
) -> None:
    """Print the changelog since the previous release."""
    ctx = build_context(verbose=verbose)
    service = ReleaseService(ctx.git, ctx.config.git)

    async def _run() -> str | None:
        latest = latest_version or await ctx.git.query.latest_tag()
        return await service.changelog(latest)

    text = run_or_exit(_run(), ctx)
    if text is None:
        ctx.console.warning("No changelog: no command configured or not at the repository root.")
        return
    ctx.console.print(text)


def release(
    version: str = typer.Argument(..., help="Version being released, e.g. 1.4.0"),
    latest_version: str | None = typer.Option(
        None,
        "--latest-version",
        help="Version of the previous release (defaults to the latest tag)",
    ),
    commit: bool = typer.Option(True, "--commit/--no-commit", help="Commit staged changes"),
    tag: bool = typer.Option(True, "--tag/--no-tag", help="Create an annotated tag"),
    push: bool = typer.Option(True, "--push/--no-push", help="Push commits and tags"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only run read-only git commands"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show git commands"),
) -> None:
    """Commit, tag and push a release."""
    ctx = build_context(verbose=verbose, dry_run=dry_run)
    cfg = ctx.config.git
    git_config = replace(
        cfg,
        commit=commit and cfg.commit,
        tag=tag and cfg.tag,
        push=push and cfg.push,
    )
    service = ReleaseService(ctx.git, git_config)

    async def _run() -> ReleaseReport:
        state = await service.preflight()
        ctx.console.print(f"{state.root} on {state.branch or '(detached)'}", Style.DIM)
        latest = latest_version or state.latest_tag
        notes = await service.changelog(latest)
        if notes:
            ctx.console.header("Changelog")
            ctx.console.print(notes)
        return await service.release(version, latest)

    report = run_or_exit(_run(), ctx)
    _print_report(report, ctx.console, dry_run=dry_run)


def _print_report(report: ReleaseReport, console: ConsoleProtocol, *, dry_run: bool) -> None:
    for warning in report.warnings:
        console.print(f"  ! {warning}", Style.DIM)

    done = {"committed": report.committed, "tagged": report.tagged, "pushed": report.pushed}
    steps = [name for name, ok in done.items() if ok]
    summary = ", ".join(steps) if steps else "nothing to do"
    prefix = "[dry-run] " if dry_run else ""
    console.success(f"{prefix}release {report.version} ({report.tag_name}): {summary}")
