"""Configuration loading and validation."""

from treeshell.config.loader import load_config
from treeshell.config.schema import ShellConfig

__all__ = [
    "ShellConfig",
    "load_config",
]
