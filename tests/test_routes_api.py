import pytest

from config import Config
from isbnkit import create_app


def test_validate_endpoint_accepts_json(client):
    response = client.post('/api/isbn/validate', json={'isbn': ' 17-85889-01-1 '})
    assert response.status_code == 200
    assert response.get_json() == {
        'success': True,
        'isbn': '17-85889-01-1',
        'canonical': '978-17-85889-01-1',
    }


def test_validate_endpoint_accepts_query_string(client):
    response = client.get('/api/isbn/validate', query_string={'isbn': '978 17 85889 01 1'})
    assert response.status_code == 200
    assert response.get_json()['canonical'] == '978-17-85889-01-1'


def test_validate_endpoint_valid_digits_in_wrong_groups(client):
    response = client.post('/api/isbn/validate', json={'isbn': '978-1785889011'})
    assert response.status_code == 200
    assert response.get_json()['canonical'] is None


@pytest.mark.parametrize("payload, reason", [
    ({}, 'empty_input'),
    ({'isbn': '9780975229804'}, 'no_groups_present'),
    ({'isbn': 9780975229804}, 'no_groups_present'),
    ({'isbn': '978-17-85889-01-X'}, 'invalid_characters'),
    ({'isbn': '98 17 85889 01 1'}, 'checksum_failed'),
    ({'isbn': '1-2-3'}, 'invalid_string_length'),
])
def test_validate_endpoint_reports_reason(client, payload, reason):
    response = client.post('/api/isbn/validate', json=payload)
    assert response.status_code == 400
    data = response.get_json()
    assert data['success'] is False
    assert data['error'] == reason
    assert data['message']


def test_parse_endpoint_returns_fields(client):
    response = client.post('/api/isbn/parse', json={'isbn': '17 85889 01 1'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['isbn'] == {
        'prefix': '978',
        'registration_group': '17',
        'registrant': '85889',
        'publication': '01',
        'check_digit': '1',
    }
    assert data['formatted'] == '978-17-85889-01-1'


def test_parse_endpoint_rejects_wrong_group_count(client):
    response = client.post('/api/isbn/parse', json={'isbn': '978-1785889011'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'invalid_input'


def test_format_endpoint_plain(client):
    response = client.post('/api/isbn/format', json={
        'isbn': '978-17-85889-01-1',
        'standard': 'isbn10',
        'separator': 'none',
    })
    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'formatted': '1785889011'}


def test_format_endpoint_tagged(client):
    response = client.post('/api/isbn/format', json={
        'isbn': '17-85889-01-1',
        'separator': 'space',
        'tagged': True,
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['formatted'] == '978 17 85889 01 1'
    assert data['spans'][0] == {'text': '978', 'part': 'prefix'}
    assert data['spans'][1] == {'text': ' ', 'part': 'separator'}
    assert ''.join(span['text'] for span in data['spans']) == data['formatted']


def test_format_endpoint_uses_configured_defaults():
    app = create_app(Config(
        SECRET_KEY='test-secret',
        WTF_CSRF_ENABLED=False,
        ISBN_DEFAULT_STANDARD='isbn10',
        ISBN_DEFAULT_SEPARATOR='space',
    ))
    client = app.test_client()

    response = client.post('/api/isbn/format', json={'isbn': '978-17-85889-01-1'})
    assert response.status_code == 200
    assert response.get_json()['formatted'] == '17 85889 01 1'

    response = client.post('/api/isbn/parse', json={'isbn': '978-17-85889-01-1'})
    assert response.get_json()['formatted'] == '17 85889 01 1'


def test_format_endpoint_reports_isbn_reason(client):
    response = client.post('/api/isbn/format', json={'isbn': '98 17 85889 01 1'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'checksum_failed'


def test_format_endpoint_reports_form_errors(client):
    response = client.post('/api/isbn/format', json={
        'isbn': '978-17-85889-01-1',
        'standard': 'isbn11',
    })
    assert response.status_code == 400
    data = response.get_json()
    assert data['error'] == 'invalid_form'
    assert 'standard' in data['errors']


NO_GROUPS_EN = 'Separate the ISBN groups with hyphens or spaces (e.g. 978-17-85889-01-1).'
NO_GROUPS_PL = 'Oddziel grupy ISBN łącznikami lub spacjami (np. 978-17-85889-01-1).'


# The locale is cached for the app context, so each test makes a single request
def test_error_message_defaults_to_english(client):
    response = client.post('/api/isbn/validate', json={'isbn': '0'})
    assert response.get_json()['message'] == NO_GROUPS_EN


def test_error_message_follows_language_cookie(client):
    client.set_cookie('language', 'pl')
    response = client.post('/api/isbn/validate', json={'isbn': '0'})
    assert response.status_code == 400
    message = response.get_json()['message']
    assert message != NO_GROUPS_EN
    assert message == NO_GROUPS_PL


def test_error_message_follows_accept_language(client):
    response = client.post('/api/isbn/validate', json={'isbn': '1-2-3'},
                           headers={'Accept-Language': 'pl,en;q=0.5'})
    assert response.get_json()['message'] == 'ISBN musi zawierać 10 lub 13 cyfr.'


def test_set_language(client):
    response = client.get('/set_language/pl')
    assert response.status_code == 200
    assert 'language=pl' in response.headers.get('Set-Cookie', '')

    response = client.get('/set_language/xx')
    assert response.status_code == 400
    assert response.get_json()['success'] is False
