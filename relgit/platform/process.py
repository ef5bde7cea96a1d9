"""Async shell execution with Result-based error handling.

Commands are shell strings (git arguments are composed textually and their
order is significant), executed with ``asyncio.create_subprocess_shell``.
A non-zero exit status is returned as ``Err(ProcessError)``, never raised.

Usage:
    result = await run_shell("git status --short", cwd=Path("."))
    match result:
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from relgit.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_shell"]

_TRUNCATE_AT = 60


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed command.

    Attributes:
        command: The shell command that was executed.
        returncode: Exit status (-1 when the process could not be started).
        stdout: Captured standard output (git reports some failures here).
        stderr: Captured standard error.
    """

    command: str
    returncode: int
    stdout: str
    stderr: str

    @property
    def output(self) -> str:
        """Both streams, for matching failure text regardless of where git wrote it."""
        return "\n".join(part for part in (self.stderr.strip(), self.stdout.strip()) if part)

    def __str__(self) -> str:
        cmd_str = self.command
        if len(cmd_str) > _TRUNCATE_AT:
            cmd_str = cmd_str[:_TRUNCATE_AT] + " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


async def run_shell(
    command: str,
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a shell command and return its stripped stdout or an error.

    Args:
        command: Shell command line.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = await asyncio.create_subprocess_shell(
            command,
            cwd=str(cwd),
            env=env,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        raw_out, raw_err = await proc.communicate()
    except OSError as e:
        return Err(ProcessError(command=command, returncode=-1, stdout="", stderr=str(e)))

    stdout = raw_out.decode("utf-8", errors="replace")
    stderr = raw_err.decode("utf-8", errors="replace")

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=command,
                returncode=proc.returncode if proc.returncode is not None else -1,
                stdout=stdout,
                stderr=stderr,
            )
        )

    return Ok(stdout.strip())
