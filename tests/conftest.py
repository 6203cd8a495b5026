# -*- coding: utf-8 -*-
"""
Shared fixtures. HTTP traffic is faked by patching the requests.Session owned by each handler, so no test touches
the network.
"""
import json
import os
from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest
import requests

from wugal.api import RequestsHandler

FIXTURES = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'fixtures')


def make_response(status_code=200, body=None, raw=None, reason='OK'):
    """Build a real requests.Response carrying body as JSON (or raw bytes)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = 'utf-8'
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode('utf-8')
    else:
        response._content = b''
    return response


def token_body(access='token-1', refresh='refresh-1', expires_in=3600):
    return {"access_token": access, "token_type": "bearer", "expires_in": expires_in, "refresh_token": refresh}


@pytest.fixture
def handler():
    """A handler that has not logged in yet."""
    return RequestsHandler(server='wug.example.com', user='admin', password='secret', retries=0)


@pytest.fixture
def wug(handler):
    """A handler holding a valid token."""
    handler.wug_session.update(token_body())
    return handler


@pytest.fixture
def api(wug):
    """Patches the handler's session.request; set .side_effect or .return_value to script responses."""
    with mock.patch.object(wug.session, 'request') as request:
        request.return_value = make_response(200, {"data": {}})
        yield request


@pytest.fixture
def expired(wug):
    wug.wug_session.expiry = datetime.now(timezone.utc) - timedelta(seconds=1)
    return wug
