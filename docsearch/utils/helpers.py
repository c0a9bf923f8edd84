"""
Helper utilities for docsearch.

Provides:
- Settings loading (TOML, merged over defaults)
- Logging setup
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
from loguru import logger

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"


def default_settings() -> Dict[str, Any]:
    """Return a fresh copy of the default settings."""
    return {
        "results": {
            "priority_count": 5,
            "default_area": "other",
            "no_results_message": "No results found.",
        },
        "logging": {
            "level": "INFO",
        },
    }


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings from a TOML file.

    Args:
        path: Settings file. Defaults to data/settings.toml in the package.

    Returns:
        Dictionary containing settings with defaults applied

    Example settings file:
        [results]
        priority_count = 5
        default_area = "other"

        [logging]
        level = "DEBUG"
    """
    defaults = default_settings()
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}; using defaults")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# Sink added by configure_logging; other sinks belong to the host application
_log_handler_id = None


def configure_logging(settings: Dict[str, Any]) -> int:
    """
    Add a stderr sink at the configured level.

    Calling again replaces only the sink added here.

    Returns:
        The loguru handler id of the new sink
    """
    global _log_handler_id
    level = settings.get("logging", {}).get("level", "INFO")
    if _log_handler_id is not None:
        try:
            logger.remove(_log_handler_id)
        except ValueError:
            # Already removed by the host application
            pass
    _log_handler_id = logger.add(sys.stderr, level=level)
    return _log_handler_id
