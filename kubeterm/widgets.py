"""
Widgets for the kubeterm TUI.

  - ScrollbackView: the render sink. Redraws from the buffer snapshot whenever
    the buffer is dirty and keeps the newest line in view.
  - CommandInput: single-line command prompt with inline suggestions for the
    known commands, accepted with Tab.
  - StatusBar: context / namespace / connection footer.
"""

from textual.binding import Binding
from textual.suggester import SuggestFromList
from textual.widgets import Input, RichLog, Static

from .scrollback import Line, ScrollbackBuffer
from .utils import render_line, status_text


class ScrollbackView(RichLog):
    """Read-only view over a ScrollbackBuffer."""

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id, wrap=True, markup=False, auto_scroll=True)
        self.rendered: tuple[Line, ...] = ()

    def refresh_from(self, buffer: ScrollbackBuffer) -> bool:
        """Redraw from `buffer` if it changed. Returns True when redrawn.

        The whole snapshot is re-read rather than diffed: a clear, an
        append and a capped eviction all look the same from here.
        """
        if not buffer.consume_dirty():
            return False

        self.rendered = buffer.snapshot()
        self.clear()
        for line in self.rendered:
            self.write(render_line(line))
        self.scroll_end(animate=False)
        return True


class CommandInput(Input):
    """Command prompt with Tab-completion of known commands."""

    BINDINGS = [
        Binding("tab", "accept_suggestion", "Accept suggestion", show=False),
    ]

    def __init__(
        self,
        commands: list[str] | None = None,
        *,
        id: str | None = None,
        placeholder: str = "",
    ) -> None:
        super().__init__(
            id=id,
            placeholder=placeholder,
            suggester=SuggestFromList(commands or [], case_sensitive=True),
        )

    def action_accept_suggestion(self) -> None:
        """Accept the inline suggestion, if any, by moving past the end."""
        self.cursor_position = len(self.value)
        self.action_cursor_right()


class StatusBar(Static):
    """Footer showing where commands would run."""

    def __init__(self, context: str, namespace: str, *, id: str | None = None) -> None:
        super().__init__(status_text(context, namespace), id=id)
