import json
from unittest.mock import MagicMock

import pytest
import requests

import app as main_app
import tracker_fetcher


def _build_response(payload=None, status_code=200, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    if text is None:
        text = json.dumps(payload) if payload is not None else ''
    resp._content = text.encode('utf-8')
    resp.encoding = 'utf-8'
    return resp


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects with a given body and status."""
    return _build_response


@pytest.fixture
def session(monkeypatch):
    mock_session = MagicMock()
    monkeypatch.setattr(tracker_fetcher, '_session', mock_session)
    return mock_session


@pytest.fixture
def client():
    main_app.app.config['TESTING'] = True
    with main_app.app.test_client() as test_client:
        yield test_client
