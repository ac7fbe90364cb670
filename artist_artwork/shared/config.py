#!/usr/bin/env python3
"""
Shared configuration utilities for the artist artwork tools.

Provides setting lookup with environment variable priority and config file fallback.
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional, Any

DEFAULT_SEARCH_URL = "https://itunes.apple.com/search"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "artist-artwork/0.1"


class ConfigManager:
    """Manages configuration loading with environment variable priority."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".config" / "artist-artwork" / "config.json"
        self._config_cache: Optional[Dict[str, Any]] = None

    def _load_config_file(self) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        if self._config_cache is not None:
            return self._config_cache

        if not self.config_path.exists():
            self._config_cache = {}
            return self._config_cache

        try:
            with open(self.config_path, 'r') as f:
                self._config_cache = json.load(f)
                return self._config_cache
        except (json.JSONDecodeError, IOError, OSError):
            self._config_cache = {}
            return self._config_cache

    def get_setting(self, env_name: str, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a setting with environment variable priority and config file fallback.

        Args:
            env_name: The environment variable name (e.g., 'ARTIST_ARTWORK_TIMEOUT')
            key: Key in the config file
            default: Value used when neither source sets it

        Returns:
            Setting as a string, or the default
        """
        # First check environment variable (highest priority)
        env_value = os.getenv(env_name)
        if env_value:
            return env_value

        # Fallback to config file
        config = self._load_config_file()
        value = config.get(key)
        if value is None:
            return default
        return str(value)

    def get_search_url(self) -> str:
        """Get the iTunes search endpoint."""
        return self.get_setting('ARTIST_ARTWORK_SEARCH_URL', 'search_url', DEFAULT_SEARCH_URL)

    def get_timeout(self) -> float:
        """Get the total request timeout in seconds."""
        value = self.get_setting('ARTIST_ARTWORK_TIMEOUT', 'timeout')
        if value is None:
            return DEFAULT_TIMEOUT

        try:
            timeout = float(value)
        except ValueError:
            return DEFAULT_TIMEOUT
        return timeout if timeout > 0 else DEFAULT_TIMEOUT

    def get_user_agent(self) -> str:
        """Get the User-Agent header sent with every request."""
        return self.get_setting('ARTIST_ARTWORK_USER_AGENT', 'user_agent', DEFAULT_USER_AGENT)

    def create_example_config(self) -> None:
        """Create an example configuration file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        example_config = {
            "search_url": DEFAULT_SEARCH_URL,
            "timeout": DEFAULT_TIMEOUT,
            "user_agent": DEFAULT_USER_AGENT
        }

        if not self.config_path.exists():
            with open(self.config_path, 'w') as f:
                json.dump(example_config, f, indent=2)


# Global instance for easy importing
config_manager = ConfigManager()
