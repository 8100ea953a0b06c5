import json

import pytest
import requests
from django.urls import reverse

from tests.factories import SupplierFactory


def proxy_url(path):
    return reverse('api:proxy', args=[path])


@pytest.mark.django_db
class TestRewriteProxy:
    def test_forwards_get_with_query_string(self, client, backend):
        backend.list('/master/suppliers', [SupplierFactory(Code=1)])
        response = client.get(proxy_url('master/suppliers'), {'status': 'Active'}, HTTP_AUTHORIZATION='Bearer abc')

        assert response.status_code == 200
        assert response.json()['data'][0]['Code'] == 1

        call = backend.calls[0]
        assert call['params'] == {'status': ['Active']}
        assert call['headers']['Authorization'] == 'Bearer abc'

    def test_forwards_post_body(self, client, backend):
        backend.add('POST', '/master/suppliers', status=201, json={'data': {'Code': 13}})
        body = json.dumps({'Name': 'Acme'})
        response = client.post(proxy_url('master/suppliers'), body, content_type='application/json')

        assert response.status_code == 201
        call = backend.calls[0]
        assert call['data'] == body.encode()
        assert call['headers']['Content-Type'] == 'application/json'

    def test_upstream_errors_pass_through(self, client, backend):
        backend.add('DELETE', '/master/suppliers/2', status=500, json={'message': 'Supplier is in use'})
        response = client.delete(proxy_url('master/suppliers/2'))
        assert response.status_code == 500
        assert response.json() == {'message': 'Supplier is in use'}

    def test_unreachable_upstream(self, client, backend):
        backend.add('GET', '/master/suppliers', exc=requests.ConnectionError('refused'))
        response = client.get(proxy_url('master/suppliers'))
        assert response.status_code == 502
        assert response.json()['status']['message'] == 'The ERP backend could not be reached.'
