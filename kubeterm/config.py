import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "KUBE_CONTEXT": "azure-aks",
    "KUBE_NAMESPACE": "default",
    "CLUSTER_NAME": "batteries-included-aks",
    "SCROLLBACK_LIMIT": "0",
    "LOG_LEVEL": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# File Paths
KUBETERM_DIR = Path(os.getenv("KUBETERM_DIR", str(Path.home() / ".kubeterm")))
CONFIG_FILE = Path(os.getenv("KUBETERM_CONFIG_FILE", str(KUBETERM_DIR / "config.json")))


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = config_file or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config_file: Path | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config(config_file)
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_int_setting(key: str, default: int, config_file: Path | None = None) -> int:
    """Get integer setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default), config_file)
    try:
        return int(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


# Initialize Configuration
KUBE_CONTEXT = get_setting("KUBE_CONTEXT", DEFAULT_CONFIG["KUBE_CONTEXT"])
KUBE_NAMESPACE = get_setting("KUBE_NAMESPACE", DEFAULT_CONFIG["KUBE_NAMESPACE"])
CLUSTER_NAME = get_setting("CLUSTER_NAME", DEFAULT_CONFIG["CLUSTER_NAME"])

# 0 keeps the scrollback unbounded
SCROLLBACK_LIMIT = max(0, get_int_setting("SCROLLBACK_LIMIT", 0))

LOG_LEVEL = get_setting("LOG_LEVEL", DEFAULT_CONFIG["LOG_LEVEL"]).upper()
if LOG_LEVEL not in LOG_LEVELS:
    console.print(
        f"[yellow]Warning: Invalid LOG_LEVEL: {LOG_LEVEL}, using default {DEFAULT_CONFIG['LOG_LEVEL']}[/yellow]"
    )
    LOG_LEVEL = DEFAULT_CONFIG["LOG_LEVEL"]
