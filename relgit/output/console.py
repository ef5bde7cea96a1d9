"""Console output abstraction.

The git layer reports warnings, errors and debug traces through this
protocol instead of printing directly. ``RichConsole`` is the production
backend; ``MockConsole`` captures output for tests.

Git output is always printed literally: branch names, ``[REV_RANGE]`` and
``! [rejected]`` lines must never be read as rich markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    HEADER = auto()
    DEBUG = auto()  # verbose only

    def __str__(self) -> str:
        return self.name.lower()


# Label printed before status messages, per style.
_LABELS: dict[Style, str] = {
    Style.SUCCESS: "OK",
    Style.ERROR: "error:",
    Style.WARNING: "warning:",
    Style.INFO: "info:",
}

_RICH_STYLES: dict[Style, str] = {
    Style.SUCCESS: "green",
    Style.ERROR: "red bold",
    Style.WARNING: "yellow",
    Style.INFO: "cyan",
    Style.DIM: "dim",
    Style.HEADER: "blue bold",
    Style.DEBUG: "dim",
}


class ConsoleProtocol(Protocol):
    """Protocol for console output.

    ``verbose`` controls whether ``debug`` output is shown; the git layer
    also reads it to decide on cosmetic output such as the blank line that
    follows a changelog command.
    """

    @property
    def verbose(self) -> bool: ...

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print ``message`` verbatim in ``style``."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def debug(self, message: str) -> None:
        """Print a diagnostic trace, only when verbose."""
        ...

    def newline(self) -> None: ...


class RichConsole:
    """Console implementation using the Rich library."""

    def __init__(self, *, verbose: bool = False) -> None:
        # Rich is only needed once something is printed.
        from rich.console import Console

        self._console = Console(highlight=False)
        self._verbose = verbose

    @property
    def verbose(self) -> bool:
        return self._verbose

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._console.print(message, style=_RICH_STYLES.get(style), markup=False)

    def _labelled(self, style: Style, message: str) -> None:
        from rich.text import Text

        line = Text.assemble((_LABELS[style] + " ", _RICH_STYLES[style]), message)
        self._console.print(line)

    def success(self, message: str) -> None:
        self._labelled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labelled(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labelled(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._labelled(Style.INFO, message)

    def header(self, message: str) -> None:
        self.newline()
        self.print(message, Style.HEADER)

    def debug(self, message: str) -> None:
        if self._verbose:
            self.print(message, Style.DEBUG)

    def newline(self) -> None:
        self._console.print()


@dataclass(frozen=True, slots=True)
class OutputRecord:
    """One captured line of MockConsole output."""

    message: str
    style: Style


def _no_records() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records output instead of printing it.

    Status messages are stored with their plain-text label, e.g.
    ``"warning: Could not stage a.txt"``.
    """

    verbose: bool = False
    outputs: list[OutputRecord] = field(default_factory=_no_records)

    def _record(self, style: Style, message: str) -> None:
        label = _LABELS.get(style)
        text = f"{label} {message}" if label else message
        self.outputs.append(OutputRecord(text, style))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self._record(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._record(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._record(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._record(Style.INFO, message)

    def header(self, message: str) -> None:
        self._record(Style.HEADER, message)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._record(Style.DEBUG, message)

    def newline(self) -> None:
        self._record(Style.DEFAULT, "")

    # Test helpers

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return self.count(Style.ERROR) > 0

    def has_warning(self) -> bool:
        return self.count(Style.WARNING) > 0

    def find(self, substring: str) -> list[OutputRecord]:
        """All records whose message contains ``substring``."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style is style)
