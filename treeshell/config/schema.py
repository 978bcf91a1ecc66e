"""Pydantic models for treeshell configuration validation."""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

LogLevel = Literal["off", "critical", "error", "warning", "info", "debug"]


class ShellConfig(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "prompt": "xcli> ",
            "edit_mode": "vi",
            "history_file": "~/.treeshell/history",
            "log_level": "info"
        }
    """

    model_config = ConfigDict(extra="forbid")

    prompt: str = "# "
    """Prompt shown by the interactive line source."""

    edit_mode: Literal["emacs", "vi"] = "emacs"
    """Initial key bindings for the line editor."""

    complete_style: Literal["column", "multi_column", "readline"] = "readline"
    """How completion candidates are displayed."""

    history_file: str | None = None
    """File the line editor persists history to. None keeps history in memory."""

    confirm_exit: bool = True
    """Ask before quitting when Ctrl+C interrupts a read."""

    log_level: LogLevel = "warning"
    """Initial level of the treeshell logger. "off" silences it."""

    log_file: str | None = None
    """Optional rotating log file."""

    @field_validator("history_file", "log_file")
    @classmethod
    def expand_user_path(cls, v: str | None) -> str | None:
        """Expand ~ in file paths."""
        if v is None:
            return None
        return os.path.expanduser(v)
