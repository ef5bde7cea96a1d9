"""Command runner used by every git operation.

``ShellRunner`` wraps ``run_shell`` with the read-only marker: read-only
commands always execute, while every other command is skipped in dry-run
mode. It also owns the template variables used by ``run_template``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Protocol

from relgit.core.result import Ok, Result
from relgit.git.template import format_template
from relgit.output.console import ConsoleProtocol, Style
from relgit.platform.process import ProcessError, run_shell

__all__ = ["CommandRunner", "ShellRunner"]


class CommandRunner(Protocol):
    """Collaborator contract consumed by the git layer."""

    async def run(
        self,
        command: str,
        *,
        read_only: bool = False,
        cwd: Path | None = None,
    ) -> Result[str, ProcessError]:
        """Run ``command``; read-only commands must not change repository state."""
        ...

    async def run_template(
        self, command: str, cwd: Path | None = None
    ) -> Result[str, ProcessError]:
        """Format ``command`` with the template variables, then run it in ``cwd``."""
        ...

    def format(self, template: str) -> str: ...

    def with_variables(self, **variables: str) -> CommandRunner: ...


def _no_variables() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class ShellRunner:
    """Production runner executing commands through the shell.

    Attributes:
        cwd: Default working directory for commands
        console: Receives command echo (verbose) and dry-run notices
        dry_run: Skip every command not marked read-only
        variables: Values for ``${name}`` placeholders in template commands
    """

    cwd: Path
    console: ConsoleProtocol
    dry_run: bool = False
    variables: Mapping[str, str] = field(default_factory=_no_variables)

    async def run(
        self,
        command: str,
        *,
        read_only: bool = False,
        cwd: Path | None = None,
    ) -> Result[str, ProcessError]:
        if self.dry_run and not read_only:
            self.console.print(f"[dry-run] $ {command}", Style.DIM)
            return Ok("")

        self.console.debug(f"$ {command}")
        return await run_shell(command, cwd=cwd or self.cwd)

    async def run_template(
        self, command: str, cwd: Path | None = None
    ) -> Result[str, ProcessError]:
        return await self.run(self.format(command), cwd=cwd)

    def format(self, template: str) -> str:
        return format_template(template, self.variables)

    def with_variables(self, **variables: str) -> ShellRunner:
        return replace(self, variables={**self.variables, **variables})
