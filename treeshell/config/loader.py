"""Configuration loading with fail-fast behavior and layered merging.

Configs are read from two layers (global -> local), letting a project
override the user's global settings key by key. With no config files at all,
the Pydantic defaults apply.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from treeshell.config.schema import ShellConfig
from treeshell.core.constants import get_default_config_path, get_local_config_path
from treeshell.core.errors import ConfigError

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None, cwd: Path | None = None) -> ShellConfig:
    """Load configuration from file with layered merging.

    When path is None, merges config from:
    1. Global user (~/.treeshell/config.json)
    2. Project local (cwd/.treeshell/config.json)

    The schema is flat, so a later layer simply replaces the keys it sets.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated ShellConfig object.

    Raises:
        ConfigError: If a config file is missing (explicit path only),
            unreadable, not a JSON object, or fails validation.
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return _validate(_read_layer(path), str(path))

    effective_cwd = cwd or Path.cwd()
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    # Skip the local layer when cwd is home (same file as the global layer)
    seen: set[Path] = set()
    for layer in (get_default_config_path(), get_local_config_path(effective_cwd)):
        resolved = layer.resolve()
        if resolved in seen or not resolved.is_file():
            continue
        seen.add(resolved)
        merged.update(_read_layer(resolved))
        loaded_from.append(layer)

    if not loaded_from:
        logger.debug("No config files found, using Pydantic defaults")
        return ShellConfig()

    logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    return _validate(merged, ", ".join(str(p) for p in loaded_from))


def _read_layer(path: Path) -> dict[str, Any]:
    """Parse one config file. A blank file is an empty layer."""
    logger.debug("Loading config file: %s", path)
    try:
        # utf-8-sig tolerates a BOM written by Windows editors
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected object in {path}, got {type(data).__name__}")
    return data


def _validate(data: dict[str, Any], sources: str) -> ShellConfig:
    try:
        return ShellConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed ({sources}): {e}") from e
