"""
Pytest configuration and shared fixtures for QFV client testing.

Every test runs against a mocked requests session; nothing here reaches the
network.
"""

import logging
from unittest.mock import Mock

import pytest
import requests

from qfv.api.authentication import AuthenticationManager
from qfv.api.client import TPICaller
from qfv.client import QFVClient
from qfv.core.config_manager import APIConfig, AppConfig
from qfv.core.logging_manager import LIBRARY_LOGGER, LoggingManager

from .fixtures.responses import make_response
from .fixtures.sample_data import INT_SUCCESS


TEST_BASE_URL = 'https://tpi.test/wsTPI/service.svc/rest'


@pytest.fixture
def api_config():
    """API settings pointing at a test host, without request delay"""
    return APIConfig(base_url=TEST_BASE_URL, request_delay=0)


@pytest.fixture
def app_config(api_config):
    return AppConfig(environment='testing', api=api_config)


@pytest.fixture
def auth_manager():
    return AuthenticationManager('acme', 'dispatch', 's3cret')


@pytest.fixture
def mock_session():
    """Mocked requests session answering every GET with <int>1</int>"""
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(INT_SUCCESS)
    return session


@pytest.fixture
def respond(mock_session):
    """Set the body (and optionally status) of the next responses"""
    def _respond(body, status_code=200):
        mock_session.get.return_value = make_response(body, status_code)
        return mock_session
    return _respond


@pytest.fixture
def caller(api_config, auth_manager, mock_session):
    return TPICaller(api_config, auth_manager, session=mock_session)


@pytest.fixture
def client(app_config, mock_session):
    """Authenticated client on a mocked session"""
    return QFVClient('acme', 'dispatch', 's3cret', config=app_config, session=mock_session)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers added by LoggingManager.configure between tests"""
    yield
    manager = LoggingManager()
    manager._remove_handlers()
    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.NOTSET)


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
