"""
Configuration for parsing and rendering.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SOUPWALK_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "parser": {
        # "html5lib" or any BeautifulSoup feature string ("html.parser", "lxml", ...)
        "backend": "html5lib",
        "strict": False
    },
    "renderer": {
        "quote_attr_values": "always",
        "omit_optional_tags": False,
        "minimize_boolean_attributes": True,
        "use_trailing_solidus": False
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Configuration manager backed by an optional JSON file."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file. Defaults to $SOUPWALK_CONFIG,
                then ~/.soupwalk/config.json
        """
        if not config_path:
            config_path = os.environ.get(CONFIG_ENV_VAR)
        if not config_path:
            config_path = os.path.join(os.path.expanduser("~"), ".soupwalk", "config.json")

        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, on top of the defaults."""
        self._set_defaults()
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                with self._lock:
                    _merge(self.config, loaded)
                logger.debug(f"Configuration loaded from {self.config_path}")
            else:
                logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            self._set_defaults()

    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.backend')
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
            key: Configuration key (can be nested using dots, e.g. 'parser.strict')
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

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of all configuration values."""
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)

        logger.debug("Default configuration set")
