from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from relgit.core.config import CONFIG_FILENAME, Config, load_config
from relgit.core.errors import ErrorCode
from relgit.core.result import Err
from relgit.git.repository import Git
from relgit.output.console import ConsoleProtocol, RichConsole

CONFIG_ENV = "RELGIT_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    cwd: Path
    config: Config
    console: ConsoleProtocol
    git: Git


def _resolve_config(cwd: Path) -> Config:
    explicit = os.environ.get(CONFIG_ENV)
    path = Path(explicit).expanduser() if explicit else cwd / CONFIG_FILENAME
    if not explicit and not path.exists():
        return Config()

    result = load_config(path)
    if isinstance(result, Err):
        typer.echo(f"error: {result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    return result.value


def build_context(*, verbose: bool = False, dry_run: bool = False) -> CLIContext:
    cwd = Path.cwd()
    console = RichConsole(verbose=verbose)
    return CLIContext(
        cwd=cwd,
        config=_resolve_config(cwd),
        console=console,
        git=Git.open(cwd, console, dry_run=dry_run),
    )
