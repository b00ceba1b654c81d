"""
Configuration utility for the engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "engine": {
        "stylesheet_index": 0
    },
    "output": {
        "indent_width": 2,
        "default_tree": "layout"
    },
    "logging": {
        "console_level": "WARNING",
        "log_file": None
    }
}


def get_default_config_path() -> str:
    """Get the default config file path, ~/.pine_engine/config.json."""
    return os.path.join(os.path.expanduser("~"), ".pine_engine", "config.json")


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration manager backed by a JSON file."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file
        """
        self.config_path = config_path or get_default_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """
        Load configuration from file.

        Values from the file override the defaults; a missing or unreadable
        file leaves the defaults in place.
        """
        overrides: Dict[str, Any] = {}
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    overrides = loaded
                    logger.debug(f"Configuration loaded from {self.config_path}")
                else:
                    logger.error(f"Ignoring configuration in {self.config_path}: top level is not an object")
            except (OSError, ValueError) as e:
                logger.error(f"Error loading configuration: {e}")
        else:
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")

        with self._lock:
            self.config = _merge(DEFAULT_CONFIG, overrides)

    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'output.indent_width')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]
            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]
            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]
            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def get_int(self, key: str, default: int, minimum: int = 0) -> int:
        """
        Get a configuration value that must be a whole number.

        Values of any other type, including booleans, or values below
        ``minimum`` are logged and replaced by ``default``.

        Args:
            key: Configuration key (can be nested using dots)
            default: Value to use when the setting is missing or invalid
            minimum: Smallest accepted value

        Returns:
            int: The configured value or default
        """
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            logger.warning(f"Invalid value {value!r} for {key} in {self.config_path}; "
                           f"using {default}")
            return default
        return value
