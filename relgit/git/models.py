"""Value types passed into git operations.

All of them are built by the caller for one invocation; nothing here is
cached between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from relgit.git.runner import CommandRunner
    from relgit.output.console import ConsoleProtocol

__all__ = [
    "DEFAULT_REMOTE",
    "ChangelogSpec",
    "CommitSpec",
    "GitContext",
    "PushTarget",
    "RepoRef",
    "TagSpec",
    "is_remote_name",
]

DEFAULT_REMOTE = "origin"

# "user@host" shaped push repo without a path: not usable as a push target.
_INVALID_PUSH_REPO = re.compile(r"^\S+@")
_SCP_LIKE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?!//)(?P<path>.+)$")


def is_remote_name(remote_url_or_name: str) -> bool:
    """True for a bare remote alias like ``origin``; anything with ``/`` is a URL."""
    return "/" not in remote_url_or_name


@dataclass(frozen=True, slots=True)
class GitContext:
    """Explicit context threaded into every operation.

    Attributes:
        cwd: The caller's working directory
        runner: Executes commands
        console: Receives warnings and debug traces
    """

    cwd: Path
    runner: CommandRunner
    console: ConsoleProtocol

    @property
    def verbose(self) -> bool:
        return self.console.verbose


@dataclass(frozen=True, slots=True)
class RepoRef:
    """Identity of a repository, for comparing two release targets.

    Attributes:
        name: ``owner/repo`` path without a ``.git`` suffix
        host: Host name (empty for local paths)
        url: The URL it was parsed from
    """

    name: str
    host: str
    url: str = ""

    @classmethod
    def from_url(cls, url: str) -> RepoRef:
        """Parse https, ssh and scp-like (``git@host:owner/repo``) remote URLs."""
        raw = url.strip()
        if "://" in raw:
            parts = urlsplit(raw)
            host = parts.hostname or ""
            path = parts.path
        elif m := _SCP_LIKE.match(raw):
            host = m.group("host")
            path = m.group("path")
        else:
            host = ""
            path = raw
        name = path.strip("/").removesuffix(".git")
        return cls(name=name, host=host, url=url)

    def is_same_repo(self, other: RepoRef) -> bool:
        return self.name == other.name and self.host == other.host


@dataclass(frozen=True, slots=True)
class CommitSpec:
    """Arguments for ``git commit``; ``message`` is a template."""

    message: str
    path: str = "."
    args: str = ""


@dataclass(frozen=True, slots=True)
class TagSpec:
    """Arguments for an annotated tag; ``name`` and ``annotation`` are templates."""

    name: str
    annotation: str
    args: str = ""


@dataclass(frozen=True, slots=True)
class ChangelogSpec:
    """Changelog command and the tag template used for ``[REV_RANGE]``."""

    command: str
    tag_name: str = "${version}"
    latest_version: str | None = None


@dataclass(frozen=True, slots=True)
class PushTarget:
    """Inputs for resolving where ``git push`` goes.

    Resolution order:
    1. a URL push repo is used as given
    2. without an upstream, ``-u <repo or origin> <branch>`` sets tracking
    3. with an upstream, a bare remote name (or empty) is used unless it
       looks like ``user@host`` without a path
    4. otherwise ``origin``
    """

    push_repo: str = ""
    has_upstream_branch: bool = False
    current_branch_name: str | None = None

    @property
    def is_url(self) -> bool:
        return bool(self.push_repo) and not is_remote_name(self.push_repo)

    @property
    def needs_branch_name(self) -> bool:
        """True when resolution depends on the current branch."""
        return not self.is_url and not self.has_upstream_branch

    def resolve(self) -> str:
        upstream = DEFAULT_REMOTE
        if self.is_url:
            upstream = self.push_repo
        elif not self.has_upstream_branch:
            remote = self.push_repo or upstream
            # A detached HEAD has no branch to track; git then reports the error.
            upstream = " ".join(p for p in ("-u", remote, self.current_branch_name) if p)
        elif not _INVALID_PUSH_REPO.match(self.push_repo):
            upstream = self.push_repo
        return upstream
