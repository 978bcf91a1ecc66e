"""Core constants and paths for treeshell.

Single source of truth for global paths. All modules should import from here
instead of hardcoding paths like `Path.home() / ".treeshell"`.
"""

from pathlib import Path

TREESHELL_DIR_NAME = ".treeshell"

VERSION = "0.1.0"

# Logger namespace configured by the CLI and adjusted by the `log` builtin
LOGGER_NAMESPACE = "treeshell"


def get_treeshell_dir() -> Path:
    """Get ~/.treeshell (global config directory)."""
    return Path.home() / TREESHELL_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_treeshell_dir() / "config.json"


def get_local_config_path(cwd: Path) -> Path:
    """Get the project-local config file path for a working directory."""
    return cwd / TREESHELL_DIR_NAME / "config.json"
