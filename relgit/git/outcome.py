"""Failure policies shared by every git operation.

A command either succeeds, fails in a way the caller can live with, or
fails fatally. ``settle`` turns a raw runner ``Result`` into an ``Outcome``
according to a ``FailureRule``; fatal failures leave as typed exceptions.

Policies:
    SILENT_PROBE       absence is an answer; nothing is logged
    WARN_AND_CONTINUE  debug trace + warning, the release goes on
    TYPED_FATAL        debug trace, optional error line, raise rule.error
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from relgit.core.result import Ok, Result
from relgit.git.errors import GitCommandError
from relgit.output.console import ConsoleProtocol
from relgit.platform.process import ProcessError

__all__ = [
    "FailurePolicy",
    "FailureRule",
    "Outcome",
    "OutcomeKind",
    "settle",
]


class FailurePolicy(Enum):
    SILENT_PROBE = auto()
    WARN_AND_CONTINUE = auto()
    TYPED_FATAL = auto()


class OutcomeKind(Enum):
    SUCCEEDED = auto()
    WARNED = auto()
    ABSENT = auto()


@dataclass(frozen=True, slots=True)
class Outcome:
    """Non-fatal result of a command.

    Attributes:
        kind: What happened
        stdout: Command output, set only when the command succeeded
        warning: The warning shown to the user, for WARNED outcomes
    """

    kind: OutcomeKind
    stdout: str | None = None
    warning: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCEEDED

    @property
    def warned(self) -> bool:
        return self.kind is OutcomeKind.WARNED


@dataclass(frozen=True, slots=True)
class FailureRule:
    """How to classify a failed command.

    Attributes:
        policy: Base policy applied to any failure
        warning: Warning text for WARN_AND_CONTINUE
        error: Exception type raised for TYPED_FATAL
        fatal_message: Console error printed before raising
        benign: Failure text that demotes TYPED_FATAL to a warning
        benign_warning: Warning text used when ``benign`` matches
    """

    policy: FailurePolicy
    warning: str = ""
    error: type[GitCommandError] = GitCommandError
    fatal_message: str | None = None
    benign: re.Pattern[str] | None = None
    benign_warning: str = ""


SILENT = FailureRule(FailurePolicy.SILENT_PROBE)
FATAL = FailureRule(FailurePolicy.TYPED_FATAL)


def _trace(console: ConsoleProtocol, failure: ProcessError) -> None:
    console.debug(str(failure))
    if failure.output:
        console.debug(failure.output)


def settle(
    result: Result[str, ProcessError],
    rule: FailureRule,
    console: ConsoleProtocol,
) -> Outcome:
    """Classify ``result`` under ``rule``.

    Raises:
        GitCommandError: ``rule.error`` for TYPED_FATAL failures that do not
            match ``rule.benign``.
    """
    if isinstance(result, Ok):
        return Outcome(OutcomeKind.SUCCEEDED, stdout=result.value)

    failure = result.error
    if rule.policy is FailurePolicy.SILENT_PROBE:
        return Outcome(OutcomeKind.ABSENT)

    _trace(console, failure)

    if rule.benign is not None and rule.benign.search(failure.output):
        console.warning(rule.benign_warning)
        return Outcome(OutcomeKind.WARNED, warning=rule.benign_warning)

    if rule.policy is FailurePolicy.WARN_AND_CONTINUE:
        console.warning(rule.warning)
        return Outcome(OutcomeKind.WARNED, warning=rule.warning)

    if rule.fatal_message:
        console.error(rule.fatal_message)
    raise rule.error(failure)
