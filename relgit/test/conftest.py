"""Shared fixtures: a scripted command runner and a capturing console."""

from __future__ import annotations

from pathlib import Path

import pytest

from relgit.git.models import GitContext
from relgit.git.repository import Git
from relgit.output.console import MockConsole
from relgit.test._fakes import FakeRunner


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def console() -> MockConsole:
    return MockConsole(verbose=True)


@pytest.fixture
def ctx(tmp_path: Path, runner: FakeRunner, console: MockConsole) -> GitContext:
    return GitContext(cwd=tmp_path, runner=runner, console=console)


@pytest.fixture
def git(ctx: GitContext) -> Git:
    return Git(ctx)
