import gzip
import json

import pytest

from tools.models import Account

TEST_KEY = '0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318'
TEST_ADDRESS = '0x2c7536E3605D9C16a7a3D7b1898e529396a65c23'


class FakeResponse:
    def __init__(self, status_code=200, data=None, body=None, headers=None, compress=False):
        if body is None:
            body = json.dumps(data if data is not None else {}).encode()
        headers = dict(headers or {})
        if compress:
            body = gzip.compress(body)
            headers['content-encoding'] = 'gzip'
        self.status_code = status_code
        self.content = body
        self.headers = headers

    @property
    def text(self):
        return self.content.decode('utf-8', errors='replace')


class FakeSession:
    """Replays canned responses keyed by url or by graphql operation name."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []
        self.closed = False

    async def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({'url': url, 'headers': headers, 'json': json, 'timeout': timeout})
        key = url
        if json and 'operationName' in json:
            key = json['operationName']
        route = self.routes[key]
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(json)
        return route

    async def close(self):
        self.closed = True

    def operations(self):
        return [c['json'].get('operationName', c['url']) for c in self.calls]


@pytest.fixture
def account():
    return Account(private_key=TEST_KEY)
