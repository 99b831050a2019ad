"""
Command interpreter for the kubeterm console.

The interpreter turns a submitted input line into scrollback output. It knows
nothing about kubectl — the embedding application hands it an ordered list of
CommandEntry objects (the registry), and the interpreter just walks that list
and runs the first handler whose predicate accepts the line.

Matching is deliberately loose: most predicates test for a substring
("get pods" anywhere in the line), so the order of the registry decides which
command wins when several would match. Use `contains()` and `equals()` to
build predicates in the same style.

Submission contract (see CommandInterpreter.submit):
  1. Trim the input. Empty input is ignored entirely.
  2. Record the trimmed line in history.
  3. Echo it as "$ <line>".
  4. Resolve the first matching registry entry.
  5. Dispatch:
     - ClearConsole wipes the scrollback; the echo is dropped.
     - Lines are appended after the echo, followed by a blank line.
     - No match appends the "not recognized" advisory instead.
     - A predicate or handler that raises is reported as a single ERROR line.
  6. Reset the input buffer.

The interpreter never lets a command take the session down: whatever the
handler does, the session is left consistent and ready for the next line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .scrollback import PROMPT_MARKER, Line, LineKind
from .session import Session, SessionClosedError

logger = logging.getLogger(__name__)

NOT_RECOGNIZED_MESSAGE = "Command not recognized. Type 'help' for available commands."


class ClearConsole:
    """Result telling the interpreter to wipe the scrollback."""

    def __repr__(self) -> str:
        return "CLEAR_CONSOLE"


CLEAR_CONSOLE = ClearConsole()


@dataclass(frozen=True)
class Lines:
    """Result carrying zero or more output lines."""

    lines: Sequence[str] = ()

    def __post_init__(self) -> None:
        # A bare string is one line, not a sequence of characters
        lines = (self.lines,) if isinstance(self.lines, str) else tuple(self.lines)
        object.__setattr__(self, "lines", lines)


CommandResult = Union[ClearConsole, Lines]
Predicate = Callable[[str], bool]
Handler = Callable[[str], CommandResult]


@dataclass(frozen=True)
class CommandEntry:
    """One registry entry: when `predicate` holds, `handler` runs."""

    predicate: Predicate
    handler: Handler
    name: str = ""

    @property
    def label(self) -> str:
        return self.name or getattr(self.handler, "__name__", "command")


def contains(fragment: str) -> Predicate:
    """Predicate matching any line that contains `fragment`."""

    def predicate(command: str) -> bool:
        return fragment in command

    return predicate


def equals(word: str) -> Predicate:
    """Predicate matching a line that is exactly `word`."""

    def predicate(command: str) -> bool:
        return command == word

    return predicate


def starts_with(prefix: str) -> Predicate:
    """Predicate matching a line whose leading word(s) are `prefix`.

    The prefix must be followed by whitespace or the end of the line, so
    "kubectl logs" matches "kubectl logs pod-a" but not "kubectl logsfoo".
    """

    def predicate(command: str) -> bool:
        if not command.startswith(prefix):
            return False
        rest = command[len(prefix) :]
        return not rest or rest[0].isspace()

    return predicate


class InterpreterState(Enum):
    IDLE = "idle"
    EXECUTING = "executing"


class CommandInterpreter:
    """Runs submitted lines against a command registry for one session."""

    def __init__(self, session: Session, registry: Sequence[CommandEntry]) -> None:
        self.session = session
        self.registry = list(registry)
        self.state = InterpreterState.IDLE

    @property
    def input_buffer(self) -> str:
        return self.session.input_buffer

    @input_buffer.setter
    def input_buffer(self, text: str) -> None:
        self.session.input_buffer = text

    def type_text(self, text: str) -> None:
        """Add typed characters to the pending input line."""
        self.session.input_buffer += text

    def resolve(self, command: str) -> CommandEntry | None:
        """Return the first registry entry whose predicate accepts `command`."""
        for entry in self.registry:
            if entry.predicate(command):
                return entry
        return None

    def submit(self, raw_input: str | None = None) -> CommandResult | None:
        """Execute one input line and record its output in the scrollback.

        Args:
            raw_input: The line to run. Defaults to the current input buffer.

        Returns:
            The result that was rendered, or None when the input was blank.

        Raises:
            SessionClosedError: If the session has already been closed.
        """
        if self.session.closed:
            raise SessionClosedError("Cannot submit to a closed session")

        if raw_input is None:
            raw_input = self.session.input_buffer
        command = raw_input.strip()
        if not command:
            return None

        self.state = InterpreterState.EXECUTING
        try:
            self.session.history.append(command)
            echo = Line(f"{PROMPT_MARKER} {command}", LineKind.PROMPT)
            result = self._execute(command, echo)
        finally:
            self.session.input_buffer = ""
            self.state = InterpreterState.IDLE
        return result

    def _execute(self, command: str, echo: Line) -> CommandResult:
        scrollback = self.session.scrollback
        entry = None

        # A raising predicate fails the command the same way a raising handler does
        try:
            entry = self.resolve(command)
            if entry is None:
                result: CommandResult = Lines([NOT_RECOGNIZED_MESSAGE])
                scrollback.append([echo, NOT_RECOGNIZED_MESSAGE, ""])
                return result

            result = entry.handler(command)
            if not isinstance(result, (ClearConsole, Lines)):
                raise TypeError(f"handler returned {type(result).__name__}, not a command result")
        except Exception as e:
            logger.exception("Command %r failed", command)
            label = entry.label if entry is not None else "command lookup"
            error = Line(f"Error: {label} failed: {e}", LineKind.ERROR)
            scrollback.append([echo, error, ""])
            return Lines([error.text])

        if isinstance(result, ClearConsole):
            scrollback.clear()
            return result

        scrollback.append([echo, *result.lines, ""])
        return result
