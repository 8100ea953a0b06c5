import json
from urllib.parse import urlsplit

import pytest
import requests
from django.core.cache import cache

API_HOST = 'http://erp.test'
API_PREFIX = '/api/v1'


def envelope(data):
    return {'data': data}


def make_response(status=200, payload=None, body=None, content_type='application/json'):
    response = requests.Response()
    response.status_code = status
    if body is None and payload is not None:
        body = json.dumps(payload)
    response._content = (body or '').encode('utf-8')
    response.headers['Content-Type'] = content_type
    return response


class FakeBackend:
    """Stands in for the ERP REST backend behind ``requests.Session.request``."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, status=200, json=None, body=None, exc=None,
            content_type='application/json'):
        self.routes[(method.upper(), path)] = (status, json, body, exc, content_type)
        return self

    def list(self, path, items):
        return self.add('GET', path, json=envelope(items))

    def handle(self, method, url, **kwargs):
        method = method.upper()
        path = urlsplit(url).path
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]
        self.calls.append({'method': method, 'path': path, **kwargs})

        route = self.routes.get((method, path))
        if route is None:
            return make_response(404, {'message': f'No route for {method} {path}'})
        status, payload, body, exc, content_type = route
        if exc is not None:
            raise exc
        return make_response(status, payload, body, content_type)

    def hits(self, method, path):
        return [call for call in self.calls if call['method'] == method.upper() and call['path'] == path]


@pytest.fixture(autouse=True)
def erp_settings(settings):
    settings.API_BASE_URL = f'{API_HOST}{API_PREFIX}'
    settings.API_UPSTREAM_URL = API_HOST
    settings.PAGE_SIZE = 5
    return settings


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def backend(monkeypatch):
    fake = FakeBackend()

    def request(session, method, url, **kwargs):
        return fake.handle(method, url, **kwargs)

    monkeypatch.setattr(requests.Session, 'request', request)
    return fake


@pytest.fixture
def htmx():
    """Extra request headers marking a request as issued by htmx."""
    return {'HTTP_HX_REQUEST': 'true'}
