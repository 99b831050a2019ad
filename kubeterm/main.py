"""
kubeterm TUI application.

KubeTermApp is the embedding application for the console core: it opens a
Session seeded with the demo transcript, builds the mock kubectl registry,
and wires the Textual widgets to the interpreter.

  Enter      -> CommandInterpreter.submit(), then redraw the scrollback
  Escape     -> close the session and exit
  Ctrl+D     -> same as Escape

The interpreter is synchronous, and Textual delivers input events one at a
time on its event loop, so submissions never overlap.
"""

from collections.abc import Iterable, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.widgets import Input, Static

from .cluster import SEED_TRANSCRIPT
from .commands import get_suggestions
from .config import CLUSTER_NAME, KUBE_CONTEXT, KUBE_NAMESPACE, LOG_LEVEL, SCROLLBACK_LIMIT
from .console import setup_logging
from .handlers import build_registry
from .interpreter import CommandEntry, CommandInterpreter
from .session import close_session, open_session
from .utils import header_text
from .widgets import CommandInput, ScrollbackView, StatusBar


class KubeTermApp(App):
    """Interactive kubectl console."""

    TITLE = "kubeterm"

    CSS = """
    Screen {
        background: #1a1a2e;
    }
    #header {
        height: 1;
        padding: 0 1;
        background: #2d1b4e;
    }
    #scrollback {
        height: 1fr;
        padding: 0 1;
        background: #1a1a2e;
        scrollbar-size-vertical: 1;
    }
    #command-input {
        border: none;
        height: 1;
        padding: 0 1;
        background: #1a1a2e;
        color: #d8b4fe;
    }
    #status-bar {
        height: 1;
        padding: 0 1;
        background: #2d1b4e;
        color: #a78bfa;
    }
    """

    BINDINGS = [
        Binding("escape", "close_console", "Close", show=False, priority=True),
        Binding("ctrl+d", "close_console", "Close", show=False, priority=True),
    ]

    def __init__(
        self,
        seed: Iterable[str] | None = None,
        registry: Sequence[CommandEntry] | None = None,
        max_lines: int | None = None,
    ) -> None:
        super().__init__()
        self.session = open_session(
            SEED_TRANSCRIPT if seed is None else seed,
            max_lines=max_lines if max_lines is not None else SCROLLBACK_LIMIT,
        )
        self.interpreter = CommandInterpreter(
            self.session, build_registry() if registry is None else registry
        )

    def compose(self) -> ComposeResult:
        yield Static(header_text(CLUSTER_NAME), id="header")
        yield ScrollbackView(id="scrollback")
        yield CommandInput(
            get_suggestions(), id="command-input", placeholder="Enter kubectl command..."
        )
        yield StatusBar(KUBE_CONTEXT, KUBE_NAMESPACE, id="status-bar")

    def on_mount(self) -> None:
        self._refresh_scrollback()
        self.query_one("#command-input", CommandInput).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.interpreter.input_buffer = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.interpreter.submit(event.value)
        event.input.value = ""
        self._refresh_scrollback()

    def action_close_console(self) -> None:
        close_session(self.session)
        self.exit()

    def _refresh_scrollback(self) -> None:
        self.query_one("#scrollback", ScrollbackView).refresh_from(self.session.scrollback)


def main():
    # Route log records through Textual so they don't tear the screen
    setup_logging(LOG_LEVEL, handler=TextualHandler())
    KubeTermApp().run()


if __name__ == "__main__":
    main()
