"""
Command metadata for the kubeterm console.

This module is the single source of truth for what the `help` command lists.
The handlers that actually run live in handlers.py; keeping the descriptions
here means the help listing and the input widget's suggestions stay in sync
when a command is added.

The help text is returned as plain lines (no Rich markup) because it goes
into the scrollback like any other command output, and the scrollback styles
lines by their content.
"""

from typing import TypedDict


class CommandInfo(TypedDict):
    """Type definition for command information."""

    usage: str  # How the command is typed, e.g. "kubectl logs <pod>"
    description: str  # Short one-line description for the help listing


COMMANDS: list[CommandInfo] = [
    {"usage": "kubectl get pods", "description": "List all pods"},
    {"usage": "kubectl get nodes", "description": "List all nodes"},
    {"usage": "kubectl get svc", "description": "List all services"},
    {"usage": "kubectl logs <pod>", "description": "Show pod logs"},
    {"usage": "clear", "description": "Clear terminal"},
    {"usage": "help", "description": "Show this help"},
]

# Width of the usage column in the help listing
USAGE_WIDTH = 20


def get_help_lines() -> list[str]:
    """Build the help listing, one aligned row per command."""
    lines = ["Available commands:"]
    for cmd in COMMANDS:
        lines.append(f"  {cmd['usage'].ljust(USAGE_WIDTH)} - {cmd['description']}")
    return lines


def get_suggestions() -> list[str]:
    """Return typeable command prefixes for inline input suggestions.

    Placeholders such as "<pod>" are cut off so the suggestion stops where
    the user has to fill something in.
    """
    return [cmd["usage"].split("<", 1)[0] for cmd in COMMANDS]
