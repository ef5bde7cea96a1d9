from __future__ import annotations

import os
from pathlib import Path

import typer

from relgit import __version__
from relgit.cli.commands.release_cmd import changelog, release
from relgit.cli.commands.repo import clone, info
from relgit.cli.context import CONFIG_ENV
from relgit.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(info)
app.command()(changelog)
app.command()(release)
app.command()(clone)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (defaults to .relgit.toml in the current directory)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' does not exist", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[CONFIG_ENV] = str(path.resolve())

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def main() -> None:
    app()
