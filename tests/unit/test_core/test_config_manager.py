"""
Unit tests for ConfigManager and the configuration models.
"""

import pytest
import yaml
from pydantic import ValidationError

from qfv.core.config_manager import (
    DEFAULT_BASE_URL,
    APIConfig,
    AppConfig,
    ConfigManager,
)
from qfv.core.error_handler import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove QFV_* variables inherited from the test environment"""
    import os
    for key in list(os.environ):
        if key.startswith('QFV_'):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def config_dir(tmp_path):
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding='utf-8')


class TestConfigModels:

    def test_defaults(self):
        config = AppConfig()
        assert config.api.base_url == DEFAULT_BASE_URL
        assert config.api.port == 443
        assert config.api.timeout == 60
        assert config.api.user_agent == ''
        assert config.api.verify_ssl is False
        assert config.credentials.customer is None
        assert config.logging.level == 'INFO'

    def test_base_url_trailing_slash_removed(self):
        assert APIConfig(base_url='https://host/rest/').base_url == 'https://host/rest'

    def test_base_url_requires_scheme(self):
        with pytest.raises(ValidationError):
            APIConfig(base_url='ftp://host/rest')

    def test_assignment_is_validated(self):
        config = APIConfig()
        with pytest.raises(ValidationError):
            config.port = 0

    def test_password_is_secret(self):
        config = AppConfig(credentials={'password': 'hunter2'})
        assert 'hunter2' not in repr(config)
        assert config.credentials.password.get_secret_value() == 'hunter2'


class TestConfigManager:

    def test_missing_files_give_defaults(self, clean_env, config_dir):
        config = ConfigManager(config_path=config_dir, environment='testing').load_config()
        assert config.environment == 'testing'
        assert config.api.base_url == DEFAULT_BASE_URL

    def test_hierarchical_override(self, clean_env, config_dir):
        write_yaml(config_dir / 'default_config.yaml', {
            'api': {'timeout': 30, 'user_agent': 'default'},
            'credentials': {'customer': 'acme'},
        })
        write_yaml(config_dir / 'staging.yaml', {'api': {'timeout': 90}})
        write_yaml(config_dir / 'local.yaml', {'credentials': {'username': 'dispatch'}})

        config = ConfigManager(config_path=config_dir, environment='staging').load_config()

        assert config.api.timeout == 90
        assert config.api.user_agent == 'default'
        assert config.credentials.customer == 'acme'
        assert config.credentials.username == 'dispatch'

    def test_environment_variable_overrides(self, clean_env, config_dir):
        write_yaml(config_dir / 'default_config.yaml', {'api': {'timeout': 30}})
        clean_env.setenv('QFV_API_TIMEOUT', '120')
        clean_env.setenv('QFV_API_VERIFY_SSL', 'true')
        clean_env.setenv('QFV_API_BASE_URL', 'https://tpi.test/rest')
        clean_env.setenv('QFV_LOGGING_LEVEL', 'DEBUG')

        config = ConfigManager(config_path=config_dir, environment='testing').load_config()

        assert config.api.timeout == 120
        assert config.api.verify_ssl is True
        assert config.api.base_url == 'https://tpi.test/rest'
        assert config.logging.level == 'DEBUG'

    def test_numeric_credentials_stay_strings(self, clean_env, config_dir):
        clean_env.setenv('QFV_CREDENTIALS_CUSTOMER', '1234')
        clean_env.setenv('QFV_CREDENTIALS_PASSWORD', '0042')

        config = ConfigManager(config_path=config_dir, environment='testing').load_config()

        assert config.credentials.customer == '1234'
        assert config.credentials.password.get_secret_value() == '0042'

    def test_unknown_sections_are_ignored(self, clean_env, config_dir):
        clean_env.setenv('QFV_ENV', 'testing')
        clean_env.setenv('QFV_OTHER_THING', 'x')

        config = ConfigManager(config_path=config_dir).load_config()

        assert config.environment == 'testing'

    def test_config_is_cached_until_reload(self, clean_env, config_dir):
        write_yaml(config_dir / 'default_config.yaml', {'api': {'timeout': 30}})
        manager = ConfigManager(config_path=config_dir, environment='testing')

        first = manager.load_config()
        write_yaml(config_dir / 'default_config.yaml', {'api': {'timeout': 45}})

        assert manager.load_config() is first
        assert manager.reload_config().api.timeout == 45

    def test_invalid_yaml(self, clean_env, config_dir):
        (config_dir / 'default_config.yaml').write_text('api: [unclosed', encoding='utf-8')
        with pytest.raises(ConfigurationError, match='Invalid YAML'):
            ConfigManager(config_path=config_dir, environment='testing').load_config()

    def test_non_mapping_yaml(self, clean_env, config_dir):
        (config_dir / 'default_config.yaml').write_text('- a\n- b\n', encoding='utf-8')
        with pytest.raises(ConfigurationError, match='must contain a mapping'):
            ConfigManager(config_path=config_dir, environment='testing').load_config()

    def test_validation_failure(self, clean_env, config_dir):
        write_yaml(config_dir / 'default_config.yaml', {'api': {'port': 70000}})
        with pytest.raises(ConfigurationError, match='Invalid configuration'):
            ConfigManager(config_path=config_dir, environment='testing').load_config()

    def test_env_value_conversion(self, config_dir):
        manager = ConfigManager(config_path=config_dir, environment='testing')
        assert manager._convert_env_value('FALSE') is False
        assert manager._convert_env_value('12') == 12
        assert manager._convert_env_value('0.5') == 0.5
        assert manager._convert_env_value('abc') == 'abc'
