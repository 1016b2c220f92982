"""
Shared fixtures for the repo-visibility test suite.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# Ensure the project root is on sys.path so tests can import project modules
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PAT_TOKEN so tests never pick up a real token."""
    monkeypatch.delenv("PAT_TOKEN", raising=False)


@pytest.fixture
def token_env(monkeypatch):
    """Provide a fake PAT via the environment."""
    monkeypatch.setenv("PAT_TOKEN", "abc123")
    return "abc123"


def make_response(status_code=200, json_data=None, text=""):
    """Build a fake requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    response.text = text
    return response


@pytest.fixture
def fake_session():
    """A session whose patch() returns a 200 response."""
    session = MagicMock(spec=requests.Session)
    session.patch.return_value = make_response(200, {"private": True}, '{"private": true}')
    return session


@pytest.fixture
def response_factory():
    return make_response
