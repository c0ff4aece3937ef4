"""
lop/tests/conftest.py

Shared pytest fixtures for the lop test suite.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from lop import format as fmt
from lop.api import Vh7Service

API_URL = 'https://example.com/api/'


def make_response(status=200, payload=None, text=None):
    """A stand-in for requests.Response with just what Vh7Service reads."""
    res = MagicMock()
    res.status_code = status
    res.ok = 200 <= status < 300
    if payload is None:
        res.json.side_effect = ValueError('Expecting value: line 1 column 1 (char 0)')
        res.text = text or ''
    else:
        res.json.return_value = payload
        res.text = text or str(payload)
    return res


@pytest.fixture
def session():
    s = MagicMock()
    s.post.return_value = make_response(200, {'id': 'xyz', 'expiresAt': None})
    return s


@pytest.fixture
def service(session):
    return Vh7Service(api_url=API_URL, session=session)


@pytest.fixture
def term():
    """Fake terminal collaborators."""
    return SimpleNamespace(
        read_clipboard=MagicMock(return_value='from clipboard'),
        confirm=MagicMock(return_value=True),
        render_qr=MagicMock(),
    )


@pytest.fixture(autouse=True)
def color_enabled():
    """Keep set_color() calls from leaking between tests."""
    yield
    fmt.set_color(True)
