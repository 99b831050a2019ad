"""kubeterm - Interactive kubectl console with a scrollback terminal"""

from .config import (
    CLUSTER_NAME,
    CONFIG_FILE,
    DEFAULT_CONFIG,
    KUBE_CONTEXT,
    KUBE_NAMESPACE,
    KUBETERM_DIR,
    LOG_LEVEL,
    SCROLLBACK_LIMIT,
    get_int_setting,
    get_setting,
    load_config,
)
from .console import console, setup_logging
from .handlers import build_registry
from .interpreter import (
    CLEAR_CONSOLE,
    NOT_RECOGNIZED_MESSAGE,
    ClearConsole,
    CommandEntry,
    CommandInterpreter,
    CommandResult,
    InterpreterState,
    Lines,
    contains,
    equals,
    starts_with,
)
from .scrollback import Line, LineKind, ScrollbackBuffer, classify_line, line_spans
from .session import KubeTermError, Session, SessionClosedError, close_session, open_session

__all__ = [
    # Config
    "CLUSTER_NAME",
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "KUBE_CONTEXT",
    "KUBE_NAMESPACE",
    "KUBETERM_DIR",
    "LOG_LEVEL",
    "SCROLLBACK_LIMIT",
    "get_int_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    "setup_logging",
    # Scrollback
    "Line",
    "LineKind",
    "ScrollbackBuffer",
    "classify_line",
    "line_spans",
    # Session
    "KubeTermError",
    "Session",
    "SessionClosedError",
    "close_session",
    "open_session",
    # Interpreter
    "CLEAR_CONSOLE",
    "NOT_RECOGNIZED_MESSAGE",
    "ClearConsole",
    "CommandEntry",
    "CommandInterpreter",
    "CommandResult",
    "InterpreterState",
    "Lines",
    "contains",
    "equals",
    "starts_with",
    # Handlers
    "build_registry",
]
