"""
Unit tests for MessagingEndpoints.
"""

from datetime import datetime

import pytest

from qfv.api.endpoints.messaging_endpoints import MessagingEndpoints
from qfv.core.error_handler import ErrorKind, OperationNotImplementedError


@pytest.fixture
def endpoints(caller):
    return MessagingEndpoints(caller)


@pytest.mark.parametrize("operation, args", [
    ('send_text_message', (['32475000000'], datetime(2013, 4, 2), True, 'Call the office')),
    ('send_form_message', (['32475000000'], 0, False, 12, 1, ['a', 'b'])),
    ('send_position_poll', (['32475000000'], 0)),
    ('get_form_definitions', ()),
])
def test_messaging_is_not_implemented(endpoints, mock_session, operation, args):
    with pytest.raises(OperationNotImplementedError) as exc_info:
        getattr(endpoints, operation)(*args)

    assert exc_info.value.kind is ErrorKind.NOT_IMPLEMENTED
    assert str(exc_info.value) == f"{operation} is not implemented"
    mock_session.get.assert_not_called()


def test_not_implemented_is_logged(endpoints, caplog):
    with caplog.at_level('WARNING', logger='qfv'):
        with pytest.raises(NotImplementedError):
            endpoints.send_position_poll(['32475000000'], 0)
    assert 'send_position_poll is not supported' in caplog.text
