"""Result type for process and config boundaries.

Every git invocation ends up as either an ``Ok`` carrying stdout or an
``Err`` carrying a ``ProcessError``. Callers decide what a failure means
instead of catching exceptions raised deep inside the runner.

Usage:
    match await runner.run("git rev-parse --git-dir", read_only=True):
        case Ok(stdout):
            print(f"git dir: {stdout}")
        case Err(error):
            print(f"not a repository: {error.stderr}")

Narrow with ``isinstance(result, Err)``; there are no unwrap helpers that
raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

__all__ = ["Err", "Ok", "Result"]

T = TypeVar("T")
E = TypeVar("E")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome holding ``value``."""

    value: T

    def value_or(self, default: D) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome holding ``error``."""

    error: E

    def value_or(self, default: D) -> D:
        return default

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
