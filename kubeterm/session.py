"""
Console session state.

A Session bundles everything one open console owns: the line being typed,
the scrollback transcript, and the list of submitted commands. It is created
when the console opens and thrown away when it closes — nothing is written to
disk, and nothing is shared between sessions.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .scrollback import ScrollbackBuffer


class KubeTermError(Exception):
    """Base class for kubeterm errors."""


class SessionClosedError(KubeTermError):
    """Raised when a closed session is used."""


@dataclass
class Session:
    """State of one open console."""

    scrollback: ScrollbackBuffer = field(default_factory=ScrollbackBuffer)
    history: list[str] = field(default_factory=list)
    input_buffer: str = ""
    closed: bool = False


def open_session(seed: Iterable[str] | None = None, max_lines: int | None = None) -> Session:
    """Create a fresh session, pre-populating the scrollback with `seed`."""
    session = Session(scrollback=ScrollbackBuffer(max_lines=max_lines))
    if seed:
        session.scrollback.append(seed)
    return session


def close_session(session: Session) -> None:
    """Discard all session state. Safe to call more than once."""
    session.scrollback.clear()
    session.history.clear()
    session.input_buffer = ""
    session.closed = True
