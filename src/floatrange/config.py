"""Settings loader for dependency resolution.

Reads settings from a JSON file and validates the structure. All fields are
optional::

    {"lenient": false, "comparison": "default", "logLevel": "INFO"}

When no file is given and ``FLOATRANGE_SETTINGS`` is unset, built-in defaults
are used. ``FLOATRANGE_LENIENT`` overrides the ``lenient`` flag.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .versioning import VersionComparer, VersionComparison, get_comparer

CONFIG_PATH_ENV_VAR = "FLOATRANGE_SETTINGS"
LENIENT_ENV_VAR = "FLOATRANGE_LENIENT"

_TRUTHY = {"1", "true", "yes", "y"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    lenient: bool = False
    comparison: str = VersionComparison.DEFAULT.value
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        try:
            VersionComparison(self.comparison)
        except ValueError as exc:
            known = ", ".join(mode.value for mode in VersionComparison)
            raise ConfigError(
                f"Unknown comparison '{self.comparison}'. Known comparisons: {known}"
            ) from exc
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level '{self.log_level}'")

    @property
    def comparer(self) -> VersionComparer:
        return get_comparer(self.comparison)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating field types."""
        lenient = data.get("lenient", False)
        if not isinstance(lenient, bool):
            raise ConfigError("Invalid 'lenient' field (must be boolean)")

        comparison = data.get("comparison", VersionComparison.DEFAULT.value)
        if not isinstance(comparison, str) or not comparison:
            raise ConfigError("Invalid 'comparison' field (must be non-empty string)")

        log_level = data.get("logLevel", "INFO")
        if not isinstance(log_level, str) or not log_level:
            raise ConfigError("Invalid 'logLevel' field (must be non-empty string)")

        return cls(lenient=lenient, comparison=comparison, log_level=log_level.upper())


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. FLOATRANGE_SETTINGS environment variable
    3. None (use defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _apply_env_overrides(settings: Settings) -> Settings:
    lenient_env = os.getenv(LENIENT_ENV_VAR)
    if lenient_env is None:
        return settings
    return Settings(
        lenient=lenient_env.strip().lower() in _TRUTHY,
        comparison=settings.comparison,
        log_level=settings.log_level,
    )


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the settings file. If not provided, uses the
            FLOATRANGE_SETTINGS env var or falls back to defaults.

    Returns:
        A validated Settings object.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        return _apply_env_overrides(Settings())

    if not config_path.exists():
        raise ConfigError(f"Settings file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read settings file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in settings file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Settings must be a JSON object")

    settings = _apply_env_overrides(Settings.from_dict(data))
    logger.debug("Loaded settings from %s: %s", config_path, settings)
    return settings
