"""
Utility functions for kubeterm.

  - Version lookup from package metadata
  - Rich rendering of scrollback lines (LineKind -> style)
  - Header and status bar text

These are pure helpers with no session state, so the widgets and the tests can
share them.
"""

from importlib.metadata import PackageNotFoundError, version

from rich.text import Text

from .scrollback import Line, LineKind, line_spans

# Terminal palette. Each LineKind maps to one Rich style.
LINE_STYLES: dict[LineKind, str] = {
    LineKind.PROMPT: "bold medium_purple1",
    LineKind.SUCCESS: "green",
    LineKind.STATUS: "plum2",
    LineKind.PLAIN: "medium_purple3",
    LineKind.ERROR: "bold red",
}


def get_version() -> str:
    """Get the installed package version, or "dev" when running from source."""
    try:
        return version("kubeterm")
    except PackageNotFoundError:
        return "dev"


def render_line(line: Line) -> Text:
    """Render one scrollback line as styled Rich Text.

    SUCCESS lines are styled per span so only the "Running" marker turns
    green; the rest of the row keeps the default style.
    """
    text = Text(no_wrap=False)
    for fragment, kind in line_spans(line):
        text.append(fragment, style=LINE_STYLES[kind])
    return text


def header_text(cluster_name: str) -> str:
    """Title shown above the scrollback."""
    return f"[bold plum2]kubectl terminal[/bold plum2]  [dim]{cluster_name}[/dim]  [dim]v{get_version()}[/dim]"


def status_text(context: str, namespace: str, connected: bool = True) -> str:
    """Status bar content: current context, namespace and connection state."""
    state = "[green]●[/green] Connected" if connected else "[red]●[/red] Disconnected"
    return f"Context: {context}    Namespace: {namespace}    {state}"
