"""Shared fixtures: a client wired to a fake upstream and a Flask test client."""

from unittest.mock import Mock, patch

import pytest

import app as app_module
from smite_api import SmiteApi

DEV_ID = '1004'
AUTH_KEY = '23DF3C7E9BD14D84BF892AD206B6755C'
API_URL = 'http://upstream.test/smiteapi.svc'
FIXED_TIMESTAMP = '20240102030405'


@pytest.fixture
def api():
    return SmiteApi(DEV_ID, AUTH_KEY, API_URL)


@pytest.fixture
def fixed_clock():
    with patch('smite_api.utc_timestamp', return_value=FIXED_TIMESTAMP):
        yield FIXED_TIMESTAMP


@pytest.fixture
def upstream():
    """
    Replaces requests.get. Call upstream.reply(*payloads) to queue the JSON
    bodies returned by successive upstream calls.
    """
    with patch('smite_api.requests.get') as mock_get:
        def reply(*payloads):
            mock_get.side_effect = [Mock(**{'json.return_value': p}) for p in payloads]

        mock_get.reply = reply
        yield mock_get


@pytest.fixture
def smite_client(monkeypatch):
    mock_client = Mock(spec=SmiteApi)
    monkeypatch.setattr(app_module, 'smite_client', mock_client)
    return mock_client


@pytest.fixture
def client(smite_client):
    return app_module.app.test_client()
