"""
Scrollback buffer for the kubeterm console.

The scrollback is the ordered transcript of everything the console has shown:
echoed prompt lines, command output, and the seed transcript loaded when the
console opens. It only ever grows by `append()` or empties by `clear()` —
lines are never edited or reordered once they are in the buffer.

Each line carries a `LineKind` that decides how it is styled on screen. The
kind is computed from the line's text by `classify_line()` (a pure function),
except for ERROR lines, which the interpreter builds explicitly when a command
handler blows up. Classification never produces ERROR on its own.

The buffer also tracks a "dirty" flag. Every mutation sets it, and the render
sink (see widgets.ScrollbackView) consumes it to know that it has to redraw
and scroll to the newest line.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

PROMPT_MARKER = "$"
SUCCESS_MARKER = "Running"
STATUS_MARKER = "Ready"


class LineKind(Enum):
    """Styling category of a scrollback line."""

    PROMPT = "prompt"
    SUCCESS = "success"
    STATUS = "status"
    PLAIN = "plain"
    ERROR = "error"


@dataclass(frozen=True)
class Line:
    """One row of console output."""

    text: str
    kind: LineKind = LineKind.PLAIN


def classify_line(text: str) -> LineKind:
    """Classify a line by its content. First match wins.

    The order matters: a prompt line that happens to contain "Running"
    (e.g. "$ grep Running") is still a prompt line.
    """
    if text.startswith(PROMPT_MARKER):
        return LineKind.PROMPT
    if SUCCESS_MARKER in text:
        return LineKind.SUCCESS
    if STATUS_MARKER in text:
        return LineKind.STATUS
    return LineKind.PLAIN


def line_spans(line: Line) -> list[tuple[str, LineKind]]:
    """Split a line into styled sub-spans.

    Only SUCCESS lines are split: every "Running" occurrence becomes its own
    SUCCESS span and the text around it stays PLAIN. Joining the span texts
    always gives back the original line text.
    """
    if line.kind is not LineKind.SUCCESS:
        return [(line.text, line.kind)]

    spans: list[tuple[str, LineKind]] = []
    parts = line.text.split(SUCCESS_MARKER)
    for index, part in enumerate(parts):
        if index > 0:
            spans.append((SUCCESS_MARKER, LineKind.SUCCESS))
        if part:
            spans.append((part, LineKind.PLAIN))
    return spans


class ScrollbackBuffer:
    """Append-only transcript of console lines with an optional size cap.

    Args:
        max_lines: Keep at most this many lines, evicting the oldest ones
            after each append. None or 0 means unbounded.
    """

    def __init__(self, max_lines: int | None = None) -> None:
        self.max_lines = max_lines or None
        self._lines: list[Line] = []
        self._dirty = False

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def append(
        self,
        lines: Iterable[str | Line],
        classify: Callable[[str], LineKind] = classify_line,
    ) -> None:
        """Append lines in order.

        Plain strings are wrapped in a Line and classified with `classify`.
        Line objects are kept as-is so callers can force a kind (ERROR).
        """
        for item in lines:
            if isinstance(item, Line):
                self._lines.append(item)
            else:
                self._lines.append(Line(item, classify(item)))

        if self.max_lines is not None and len(self._lines) > self.max_lines:
            del self._lines[: len(self._lines) - self.max_lines]
        self._dirty = True

    def clear(self) -> None:
        self._lines = []
        self._dirty = True

    def snapshot(self) -> tuple[Line, ...]:
        """Return the current lines in display order."""
        return tuple(self._lines)

    def consume_dirty(self) -> bool:
        """Return whether the buffer changed since the last call, and reset."""
        dirty = self._dirty
        self._dirty = False
        return dirty
