"""
Mock kubectl command handlers and the default command registry.

Each handler receives the trimmed command line and returns a CommandResult:
either Lines for output or CLEAR_CONSOLE. The handlers serve the fixed demo
data from cluster.py; none of them reach a real cluster.

build_registry() wires the handlers to their predicates. Order matters —
the interpreter runs the first entry that matches, and most predicates are
substring tests, so "kubectl get pods -A" hits the pods entry even though
it carries extra flags.
"""

from .cluster import NODES_TABLE, POD_LOGS, PODS_TABLE, SERVICES_TABLE
from .commands import get_help_lines
from .interpreter import (
    CLEAR_CONSOLE,
    CommandEntry,
    CommandResult,
    Lines,
    contains,
    equals,
    starts_with,
)

LOGS_PREFIX = "kubectl logs"

# kubectl logs flags that take a separate value argument
VALUE_FLAGS = {"-n", "--namespace", "-c", "--container", "--tail", "--since"}


def get_pods(_command: str) -> CommandResult:
    """Handle `kubectl get pods` (any flags)."""
    return Lines(PODS_TABLE)


def get_nodes(_command: str) -> CommandResult:
    """Handle `kubectl get nodes` (any flags)."""
    return Lines(NODES_TABLE)


def get_services(_command: str) -> CommandResult:
    """Handle `kubectl get svc` (any flags)."""
    return Lines(SERVICES_TABLE)


def pod_logs(command: str) -> CommandResult:
    """Handle `kubectl logs <pod>`.

    Flags are ignored (along with the value of -n/-c style flags); the first
    remaining argument is the pod name. A missing or unknown pod produces the
    same error text kubectl prints, as ordinary output.
    """
    args = []
    tokens = iter(command[len(LOGS_PREFIX) :].split())
    for token in tokens:
        if token in VALUE_FLAGS:
            next(tokens, None)
        elif not token.startswith("-"):
            args.append(token)
    if not args:
        return Lines(["error: expected 'logs [-f] [-p] (POD | TYPE/NAME) [-c CONTAINER]'."])

    pod = args[0].removeprefix("pod/")
    logs = POD_LOGS.get(pod)
    if logs is None:
        return Lines([f'Error from server (NotFound): pods "{pod}" not found'])
    return Lines(logs)


def clear_console(_command: str) -> CommandResult:
    """Handle `clear`."""
    return CLEAR_CONSOLE


def show_help(_command: str) -> CommandResult:
    """Handle `help`."""
    return Lines(get_help_lines())


def build_registry() -> list[CommandEntry]:
    """Return the default registry in match order."""
    return [
        CommandEntry(contains("get pods"), get_pods, "get pods"),
        CommandEntry(contains("get nodes"), get_nodes, "get nodes"),
        CommandEntry(contains("get svc"), get_services, "get svc"),
        CommandEntry(starts_with(LOGS_PREFIX), pod_logs, "logs"),
        CommandEntry(equals("clear"), clear_console, "clear"),
        CommandEntry(equals("help"), show_help, "help"),
    ]
