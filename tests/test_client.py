from decimal import Decimal

import pytest
import requests

from apps.core.api.client import JOIN_ERROR_MESSAGE, ApiClient, decode
from apps.core.api.errors import DecodeError, HTTPStatusError, JoinError, TransportError, extract_message
from apps.master.serializers import CostSerializer, SupplierSerializer
from tests.factories import SupplierFactory


class TestExtractMessage:
    def test_status_message_wins(self):
        payload = {'status': {'code': 400, 'message': 'Name already exists'}, 'message': 'Bad Request'}
        assert extract_message(payload, 'Failed.') == 'Name already exists'

    def test_top_level_message(self):
        assert extract_message({'message': 'Not found'}, 'Failed.') == 'Not found'

    @pytest.mark.parametrize('payload', [None, [], {'status': 'error'}, {'message': ''}])
    def test_default(self, payload):
        assert extract_message(payload, 'Failed.') == 'Failed.'


class TestDecode:
    def test_coerces_declared_fields_and_keeps_embedded_objects(self):
        raw = {'Code': '7', 'Name': 'Freight', 'Percentage': '2.5', 'Status': 'Active',
               'Creator': {'Name': 'admin'}}
        record = decode(CostSerializer, raw)
        assert record['Code'] == 7
        assert record['Percentage'] == Decimal('2.5')
        assert record['Creator'] == {'Name': 'admin'}

    def test_zero_padded_code_stays_a_string(self):
        assert decode(CostSerializer, {'Code': '007', 'Name': 'Freight'})['Code'] == '007'
        assert decode(CostSerializer, {'Code': '07', 'Name': 'Freight', 'Status': 'Active'})['Code'] == '07'
        assert decode(CostSerializer, {'Code': '70', 'Name': 'Freight'})['Code'] == 70

    def test_rejects_bad_status(self):
        with pytest.raises(DecodeError) as exc:
            decode(CostSerializer, {'Code': 1, 'Name': 'Freight', 'Status': 'Archived'})
        assert 'Status' in exc.value.errors

    def test_rejects_non_object(self):
        with pytest.raises(DecodeError):
            decode(CostSerializer, ['not', 'a', 'record'])


class TestApiClient:
    def test_list_unwraps_envelope(self, backend):
        backend.list('/master/suppliers', [SupplierFactory(Code=1), SupplierFactory(Code='2')])
        suppliers = ApiClient().list('/master/suppliers', SupplierSerializer)
        assert [s['Code'] for s in suppliers] == [1, 2]
        assert backend.calls[0]['timeout'] == ApiClient().timeout

    def test_null_data_is_an_empty_list(self, backend):
        backend.add('GET', '/master/suppliers', json={'data': None})
        assert ApiClient().list('/master/suppliers') == []

    def test_missing_envelope_is_a_decode_error(self, backend):
        backend.add('GET', '/master/suppliers', json=[{'Code': 1}])
        with pytest.raises(DecodeError) as exc:
            ApiClient().list('/master/suppliers', default_error='Failed to fetch suppliers.')
        assert exc.value.message == 'Failed to fetch suppliers.'

    def test_http_error_carries_backend_message(self, backend):
        backend.add('DELETE', '/master/suppliers/4', status=500,
                    json={'status': {'code': 500, 'message': 'Supplier is referenced by a PO'}})
        with pytest.raises(HTTPStatusError) as exc:
            ApiClient().delete('/master/suppliers', 4)
        assert exc.value.message == 'Supplier is referenced by a PO'
        assert exc.value.status_code == 500

    def test_http_error_without_body_uses_default(self, backend):
        backend.add('GET', '/master/suppliers', status=503, body='')
        with pytest.raises(HTTPStatusError) as exc:
            ApiClient().list('/master/suppliers', default_error='Failed to fetch suppliers.')
        assert str(exc.value) == 'Failed to fetch suppliers.'

    def test_status_code_inside_200_answer(self, backend):
        backend.add('POST', '/master/products', json={'status': {'code': 409, 'message': 'Name already exists'}})
        with pytest.raises(HTTPStatusError) as exc:
            ApiClient().create('/master/products', {'Name': 'Towel'})
        assert exc.value.status_code == 409

    def test_transport_error(self, backend):
        backend.add('GET', '/master/suppliers', exc=requests.ConnectionError('refused'))
        with pytest.raises(TransportError) as exc:
            ApiClient().list('/master/suppliers', default_error='Failed to fetch suppliers.')
        assert exc.value.message == 'Failed to fetch suppliers.'

    def test_get_record(self, backend):
        backend.add('GET', '/master/suppliers/5', json={'data': SupplierFactory(Code=5)})
        assert ApiClient().get('/master/suppliers', 5, SupplierSerializer)['Code'] == 5

    def test_create_posts_json_and_returns_data(self, backend):
        backend.add('POST', '/master/suppliers', status=201, json={'data': {'Code': 11, 'Name': 'Acme'}})
        created = ApiClient().create('/master/suppliers', {'Name': 'Acme'})
        assert created == {'Code': 11, 'Name': 'Acme'}
        assert backend.hits('POST', '/master/suppliers')[0]['json'] == {'Name': 'Acme'}

    def test_created_status_in_body_is_a_success(self, backend):
        backend.add('POST', '/master/suppliers', status=201,
                    json={'status': {'code': 201, 'message': 'Created'}, 'data': {'Code': 11}})
        assert ApiClient().create('/master/suppliers', {'Name': 'Acme'}) == {'Code': 11}

    def test_update_with_2xx_status_in_body(self, backend):
        backend.add('PUT', '/master/suppliers/11',
                    json={'status': {'code': 201, 'message': 'Updated'}, 'data': {'Code': 11}})
        assert ApiClient().update('/master/suppliers', 11, {'Name': 'Acme Ltd'}) == {'Code': 11}

    def test_update_puts_to_record_url(self, backend):
        backend.add('PUT', '/master/suppliers/11', json={'data': {'Code': 11, 'Name': 'Acme Ltd'}})
        assert ApiClient().update('/master/suppliers', 11, {'Name': 'Acme Ltd'})['Name'] == 'Acme Ltd'


class TestFetchMany:
    def test_joins_every_collection(self, backend):
        backend.list('/master/suppliers', [SupplierFactory()])
        backend.list('/master/banks', [])
        results = ApiClient().fetch_many({
            'suppliers': ('/master/suppliers', SupplierSerializer),
            'banks': ('/master/banks', None),
        })
        assert len(results['suppliers']) == 1
        assert results['banks'] == []

    def test_one_failure_fails_the_join(self, backend):
        backend.list('/master/suppliers', [SupplierFactory()])
        backend.add('GET', '/master/banks', status=500, json={'message': 'boom'})
        with pytest.raises(JoinError) as exc:
            ApiClient().fetch_many({
                'suppliers': ('/master/suppliers', SupplierSerializer),
                'banks': ('/master/banks', None),
            })
        assert exc.value.message == JOIN_ERROR_MESSAGE
        assert list(exc.value.errors) == ['banks']

    def test_nothing_to_fetch(self, backend):
        assert ApiClient().fetch_many({}) == {}
        assert backend.calls == []
