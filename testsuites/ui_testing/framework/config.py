"""
================================================================================
UI Framework Configuration
================================================================================

Centralized configuration and logging setup for the UI automation framework.

Features:
    - YAML-based configuration loading
    - Environment-specific overrides (config/{ENV}.yaml)
    - Environment variable overrides (SECTION__KEY)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initialize the global Loguru logger.

    Safe to call multiple times; only the first call configures sinks
    (until `reload_config()` resets the state).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = str(level or get_config("logging.level", "INFO")).upper()
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _config_dirs() -> List[Path]:
    """Candidate configuration directories, in priority order."""
    override = os.getenv("UI_CONFIG_DIR")
    dirs = [Path(override)] if override else []
    dirs.extend([Path("config"), PROJECT_ROOT / "config"])
    return dirs


def _load_config() -> None:
    """
    Load configuration from YAML files and environment variables.

    Loading order:
        1. Built-in defaults
        2. config/config.yaml
        3. config/{ENV}.yaml
        4. Environment variables (SECTION__KEY)
    """
    global _config

    _config = _get_defaults()

    config_dir = next((d for d in _config_dirs() if d.is_dir()), None)
    if config_dir is None:
        logger.warning("No configuration directory found. Using defaults.")
    else:
        default_path = config_dir / "config.yaml"
        if default_path.exists():
            with open(default_path, "r", encoding="utf-8") as f:
                _config = _deep_merge(_config, yaml.safe_load(f) or {})
            logger.debug(f"Loaded configuration from {default_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_path = config_dir / f"{env}.yaml"
        if env_path.exists():
            with open(env_path, "r", encoding="utf-8") as f:
                _config = _deep_merge(_config, yaml.safe_load(f) or {})
            logger.debug(f"Merged environment config: {env_path}")

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    return {
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
        },
        "ui": {
            "base_url": "http://localhost:8080",
            "browser": "chromium",
            "headless": True,
            "timeout": 10000,
            "viewport": {"width": 1920, "height": 1080},
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Apply environment variable overrides.

    Double underscore separates nested keys: UI__BASE_URL -> ui.base_url
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            parts = [p.lower() for p in key.split("__") if p]
            if parts:
                _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: List[str], value: Any) -> None:
    for key in keys[:-1]:
        nested = d.get(key)
        if not isinstance(nested, dict):
            nested = d[key] = {}
        d = nested
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieve a configuration value using a dot-separated key path.

    Examples:
        >>> get_config("ui.base_url")
        'http://localhost:8080'
        >>> get_config("ui.missing", 42)
        42
    """
    _ensure_config_loaded()

    value: Any = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


def get_bool(key: str, default: bool = False) -> bool:
    """Read a boolean value; environment overrides arrive as strings."""
    value = get_config(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def set_config(key: str, value: Any) -> None:
    """Set a configuration value at runtime."""
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config() -> None:
    """Reload configuration from files and reconfigure logging."""
    global _config, _logger_initialized
    _config = {}
    _logger_initialized = False
    _load_config()
    init_logger()
    logger.info("Configuration reloaded.")


__all__ = [
    "init_logger",
    "get_config",
    "get_bool",
    "set_config",
    "reload_config",
]
