import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db


def test_healthz_reports_database():
    r = APIClient().get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}


def test_api_docs_describe_the_endpoints():
    r = APIClient().get('/api-docs')
    assert r.status_code == 200
    doc = r.json()
    assert doc['info']['title'] == 'Doctor Suggestion API'
    paths = doc['paths']
    assert any(p.endswith('/suggest-doctor/{patient_id}') for p in paths)
    doctors = next(p for p in paths if p.endswith('/doctors'))
    assert 'post' in paths[doctors]


def test_wrong_method_uses_error_envelope():
    r = APIClient().put('/api/doctors', {}, format='json')
    assert r.status_code == 405
    assert r.data['ok'] is False
    assert r.data['error']['code'] == 'api_error'


def test_metrics_are_exposed():
    r = APIClient().get('/metrics')
    assert r.status_code == 200
    assert b'django_http_requests' in r.content


@pytest.mark.parametrize('path', ['/swagger/', '/redoc/'])
def test_documentation_pages_render(path):
    r = APIClient().get(path)
    assert r.status_code == 200
    assert b'Doctor Suggestion API' in r.content


def test_api_docs_are_served_as_json():
    r = APIClient().get('/api-docs')
    assert r['Content-Type'].startswith('application/json')


def test_error_message_is_plain_text():
    r = APIClient().get('/api/patients/424242')
    assert r.status_code == 404
    assert type(r.data['error']['message']) is str
    assert r.data['error']['message'] == 'patient not found'
