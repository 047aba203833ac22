"""
Configuration module for the Microsoft Graph identity client.

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

    def _set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Graph API
        if os.getenv("GRAPH_ENVIRONMENT"):
            self._set("graph", "environment", os.getenv("GRAPH_ENVIRONMENT"))

        if os.getenv("GRAPH_API_VERSION"):
            self._set("graph", "api_version", os.getenv("GRAPH_API_VERSION"))

        if os.getenv("AZURE_TENANT_ID"):
            self._set("graph", "tenant_id", os.getenv("AZURE_TENANT_ID"))

        # Authentication
        if os.getenv("AZURE_CLIENT_ID"):
            self._set("authentication", "client_id", os.getenv("AZURE_CLIENT_ID"))

        if os.getenv("GRAPH_ACCESS_TOKEN"):
            self._set("authentication", "access_token", os.getenv("GRAPH_ACCESS_TOKEN"))

        # Logging
        if os.getenv("LOG_LEVEL"):
            self._set("logging", "level", os.getenv("LOG_LEVEL"))

        if os.getenv("LOG_FILE"):
            self._set("logging", "file", os.getenv("LOG_FILE"))

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        if "graph" not in self.config:
            raise ValueError("Missing required configuration sections: graph")

        if not self.get("graph.tenant_id"):
            raise ValueError("Missing required configuration keys: graph.tenant_id")

        if self.environment not in constants.GRAPH_ENDPOINTS:
            raise ValueError(
                f"Unknown Graph environment '{self.environment}'. "
                f"Available environments: {', '.join(constants.GRAPH_ENDPOINTS)}"
            )

        if self.api_version not in constants.API_VERSIONS:
            raise ValueError(
                f"Unknown Graph API version '{self.api_version}'. "
                f"Available versions: {', '.join(constants.API_VERSIONS)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'graph.tenant_id')
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
    def environment(self) -> str:
        """Get national cloud environment name."""
        return str(self.get("graph.environment", constants.ENVIRONMENT_GLOBAL)).lower()

    @property
    def graph_endpoint(self) -> str:
        """Get Graph endpoint for the configured environment."""
        return constants.GRAPH_ENDPOINTS[self.environment]

    @property
    def api_version(self) -> str:
        """Get default Graph API version."""
        return self.get("graph.api_version", constants.VERSION_1_0)

    @property
    def tenant_id(self) -> str:
        """Get tenant ID."""
        return self.get("graph.tenant_id", "")

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("graph.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("graph.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("graph.verify_ssl", True)

    @property
    def client_id(self) -> Optional[str]:
        """Get application (client) ID."""
        return self.get("authentication.client_id")

    @property
    def access_token(self) -> Optional[str]:
        """Get pre-acquired access token."""
        return self.get("authentication.access_token")

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, environment={self.environment}, tenant={self.tenant_id})"
