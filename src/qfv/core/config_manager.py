"""Configuration Management for the QFV client

Handles loading and validation of client configuration. Supports
hierarchical YAML files with environment variable overrides.
"""

import os
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from .error_handler import ConfigurationError


DEFAULT_BASE_URL = 'https://export.fleetvisor.eu/wsTPI/service.svc/rest'
DEFAULT_PORT = 443
DEFAULT_TIMEOUT = 60


class APIConfig(BaseModel):
    """Configuration for the TPI web service."""
    model_config = ConfigDict(validate_assignment=True)

    base_url: str = Field(default=DEFAULT_BASE_URL)
    port: Optional[int] = Field(default=DEFAULT_PORT, ge=1, le=65535)
    timeout: int = Field(default=DEFAULT_TIMEOUT)
    user_agent: str = Field(default="")
    verify_ssl: bool = Field(default=False)
    follow_redirects: bool = Field(default=True)
    # seconds to wait before every request
    request_delay: float = Field(default=0.0002, ge=0.0)

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Validate base URL format"""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip('/')


class CredentialsConfig(BaseModel):
    """Credentials for the TPI web service."""
    model_config = ConfigDict(validate_assignment=True)

    customer: Optional[str] = None
    username: Optional[str] = None
    password: Optional[SecretStr] = None


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=False)
    file_path: Optional[str] = None
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)
    backup_count: int = Field(default=5, ge=1, le=20)


class AppConfig(BaseModel):
    """Main client configuration."""
    model_config = ConfigDict(validate_assignment=True)

    environment: str = Field(default="development", pattern="^(development|staging|production|testing)$")
    api: APIConfig = Field(default_factory=APIConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages client configuration loading and validation."""

    ENV_PREFIX = "QFV_"

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to the configuration directory
            environment: Environment name (development, staging, production)
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('QFV_ENV', 'development')
        self._config: Optional[AppConfig] = None
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

        # Configuration file paths
        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        # Looking for config in order of precedence
        config_locations = [
            Path("config"),
            Path.home() / ".qfv",
            Path("/etc/qfv"),
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'  # For development overrides
        }

    def load_config(self) -> AppConfig:
        """Load and validate configuration with hierarchical overrides.

        Returns:
            Validated client configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {'environment': self.environment}

            # Load configurations in order of precedence
            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {sorted(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._config = AppConfig(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def reload_config(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._config = None
        return self.load_config()

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: QFV_<SECTION>_<KEY>
        Example: QFV_API_BASE_URL -> api.base_url
        """
        overrides: Dict[str, Any] = {}
        sections = {'api', 'credentials', 'logging'}

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue

            section, _, field_name = key[len(self.ENV_PREFIX):].lower().partition('_')
            if section not in sections or not field_name:
                continue

            # credentials are opaque strings, even when they look numeric
            if section != 'credentials':
                value = self._convert_env_value(value)
            overrides.setdefault(section, {})[field_name] = value

        return overrides

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        # Boolean conversion
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        # Numeric conversion
        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value
