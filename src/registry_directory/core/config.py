"""
Configuration module for the registry directory.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Registry
        if os.getenv("REGISTRY_BASE_URL"):
            self.config.setdefault("registry", {})["base_url"] = os.getenv("REGISTRY_BASE_URL")

        # Cache backend
        if os.getenv("REDIS_URL"):
            self.config.setdefault("cache", {})["url"] = os.getenv("REDIS_URL")

        if os.getenv("CACHE_KEY"):
            self.config.setdefault("cache", {})["key"] = os.getenv("CACHE_KEY")

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "registry": ["base_url"],
            "cache": ["url"],
        }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if not self.config[section].get(key):
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if self.page_size < 1:
            raise ValueError(f"pagination.page_size must be positive, got {self.page_size}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'registry.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def registry_base_url(self) -> str:
        """Get registry base URL."""
        return self.get("registry.base_url", constants.DEFAULT_REGISTRY_BASE_URL)

    @property
    def registry_objects_endpoint(self) -> str:
        """Get registry endpoint that lists all objects."""
        return self.get("registry.objects_endpoint", constants.DEFAULT_OBJECTS_ENDPOINT)

    @property
    def registry_timeout(self) -> int:
        """Get registry request timeout in seconds."""
        return self.get("registry.timeout", constants.DEFAULT_API_TIMEOUT)

    @property
    def registry_max_retries(self) -> int:
        """Get maximum transport-level retry attempts."""
        return self.get("registry.max_retries", constants.DEFAULT_API_MAX_RETRIES)

    @property
    def registry_verify_ssl(self) -> bool:
        """Get registry SSL verification setting."""
        return self.get("registry.verify_ssl", True)

    @property
    def cache_url(self) -> str:
        """Get cache backend connection URL."""
        return self.get("cache.url", constants.DEFAULT_CACHE_URL)

    @property
    def cache_key(self) -> str:
        """Get the key the dataset is stored under."""
        return self.get("cache.key", constants.DEFAULT_CACHE_KEY)

    @property
    def cache_socket_timeout(self) -> float:
        """Get cache backend socket timeout in seconds."""
        return self.get("cache.socket_timeout", constants.DEFAULT_CACHE_SOCKET_TIMEOUT)

    @property
    def page_size(self) -> int:
        """Get number of organizations per page."""
        return self.get("pagination.page_size", constants.PAGE_SIZE)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path (None falls back to LOG_FILE env var)."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
