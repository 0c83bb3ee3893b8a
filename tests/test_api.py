"""
Tests for the JSON data endpoints and the health check
"""

import re
from datetime import datetime

import pytest


class TestProfileEndpoint:
    """Profile data per locale"""

    @pytest.mark.parametrize('locale, title', [
        ('en', 'Full Stack Developer'),
        ('pt-BR', 'Desenvolvedor Full Stack'),
    ])
    def test_profile_returns_locale_content(self, client, locale, title):
        response = client.get(f'/api/data/{locale}/profile')
        assert response.status_code == 200
        assert response.is_json

        data = response.get_json()
        assert {'name', 'title', 'contact'} <= set(data)
        assert data['title'] == title
        assert data['contact']['email'] == 'contato@joaovjo.com.br'

    def test_profile_keeps_non_ascii_text(self, client):
        response = client.get('/api/data/pt-BR/profile')
        assert 'João' in response.get_data(as_text=True)

    @pytest.mark.parametrize('locale', ['en', 'pt-BR'])
    def test_profile_unavailable_returns_503(self, degraded_client, locale):
        response = degraded_client.get(f'/api/data/{locale}/profile')
        assert response.status_code == 503

        data = response.get_json()
        assert data['error'] == 'Service Unavailable'
        assert locale in data['message']

    def test_unsupported_locale_is_not_found(self, client):
        response = client.get('/api/data/fr/profile')
        assert response.status_code == 404
        assert response.get_json()['error'] == 'Not Found'


class TestSectionEndpoints:
    """Other content sections and the structured metadata document"""

    @pytest.mark.parametrize('section', ['skills', 'experience', 'education', 'ui'])
    def test_sections_are_served(self, client, section):
        response = client.get(f'/api/data/en/{section}')
        assert response.status_code == 200
        assert isinstance(response.get_json(), dict)

    def test_education_lists_degrees(self, client):
        data = client.get('/api/data/pt-BR/education').get_json()
        assert data['degrees'][0]['course'] == 'Bacharelado em Ciência da Computação'

    def test_unknown_section_is_not_found(self, client):
        assert client.get('/api/data/en/secrets').status_code == 404

    def test_schema_document(self, client):
        response = client.get('/api/data/en/schema')
        assert response.status_code == 200

        data = response.get_json()
        assert data['@type'] == 'ProfilePage'
        assert data['mainEntity']['jobTitle'] == 'Full Stack Developer'
        assert data['mainEntity']['url'] == 'https://example.com'

    def test_schema_unavailable_returns_503(self, degraded_client):
        assert degraded_client.get('/api/data/en/schema').status_code == 503


class TestHealthEndpoint:

    def test_health_payload(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200

        data = response.get_json()
        assert data['status'] == 'ok'
        assert data['mode'] == 'development'
        parsed = datetime.fromisoformat(data['timestamp'].replace('Z', '+00:00'))
        assert parsed.tzinfo is not None

    def test_health_ok_even_when_content_failed(self, degraded_client):
        assert degraded_client.get('/api/health').get_json()['status'] == 'ok'

    def test_health_reports_production_mode(self, tmp_path, data_dir):
        from app import create_app

        prod_app = create_app('production', overrides={'DATA_DIR': str(data_dir)})
        data = prod_app.test_client().get('/api/health').get_json()
        assert data['mode'] == 'production'


class TestApiNotFound:

    @pytest.mark.parametrize('path', ['/api/data/en/nope', '/api/unknown', '/api/data/en'])
    def test_unknown_api_paths_return_json(self, client, path):
        response = client.get(path)
        assert response.status_code == 404
        assert response.is_json

        data = response.get_json()
        assert data['error'] == 'Not Found'
        assert path in data['message']


def test_health_timestamp_has_millisecond_precision(client):
    timestamp = client.get('/api/health').get_json()['timestamp']
    assert re.fullmatch(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z', timestamp)
