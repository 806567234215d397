"""
Test Suite for the Flask API
"""

import io
import json

import pytest

from conftest import AI_STYLE_TEXT, CASUAL_TEXT


@pytest.fixture
def api():
    import app as app_module
    app_module.app.config['TESTING'] = True
    app_module.limiter.enabled = False
    return app_module


@pytest.fixture
def client(api):
    with api.app.test_client() as client:
        yield client


def upload(client, data, filename):
    return client.post(
        '/api/analyze/file',
        data={'file': (io.BytesIO(data), filename)},
        content_type='multipart/form-data',
    )


class TestHealth:

    def test_health(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200
        body = response.get_json()
        assert body['status'] == 'ok'
        assert body['timestamp'].endswith('Z')


class TestAnalyzeText:

    def test_analyze(self, client):
        response = client.post('/api/analyze/text', json={'text': AI_STYLE_TEXT})
        assert response.status_code == 200
        body = response.get_json()
        assert body['type'] == 'text'
        assert body['aiProbability'] >= 55
        assert len(body['details']) == 37
        assert 'behavioralDetails' not in body

    def test_short_text_is_200_with_error(self, client):
        response = client.post('/api/analyze/text', json={'text': 'hello there'})
        assert response.status_code == 200
        assert response.get_json() == {
            'error': 'Please provide at least 50 characters for meaningful analysis.'
        }

    def test_missing_text(self, client):
        response = client.post('/api/analyze/text', json={'body': 'x'})
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'MISSING_INPUT'

    def test_not_json(self, client):
        response = client.post('/api/analyze/text', data='plain', content_type='text/plain')
        assert response.status_code == 400

    def test_text_too_long(self, client, api, monkeypatch):
        monkeypatch.setattr(api.config, 'MAX_TEXT_LENGTH', 100)
        response = client.post('/api/analyze/text', json={'text': CASUAL_TEXT})
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'INVALID_INPUT'

    def test_behavior_applied(self, client, api):
        plain = api.ai_detector.analyze(CASUAL_TEXT)
        response = client.post('/api/analyze/text', json={
            'text': CASUAL_TEXT,
            'behavior': {'pasteRatio': 0.95, 'avgCharsPerSecond': 120, 'editCount': 0},
        })
        body = response.get_json()
        assert response.status_code == 200
        assert body['aiProbability'] == plain['aiProbability'] + 11
        assert [d['name'] for d in body['behavioralDetails']] == [
            'Paste Detection', 'Input Speed', 'Edit Patterns',
        ]

    def test_null_behavior_is_ignored(self, client):
        response = client.post('/api/analyze/text', json={'text': CASUAL_TEXT, 'behavior': None})
        assert response.status_code == 200
        assert 'behavioralDetails' not in response.get_json()

    def test_invalid_behavior(self, client):
        response = client.post('/api/analyze/text', json={
            'text': CASUAL_TEXT,
            'behavior': {'pasteRatio': 'lots'},
        })
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'INVALID_BEHAVIOR'

    @pytest.mark.parametrize('field, literal', [('pasteRatio', 'NaN'), ('avgCharsPerSecond', 'Infinity')])
    def test_non_finite_behavior(self, client, field, literal):
        body = json.dumps({'text': CASUAL_TEXT})[:-1] + ', "behavior": {"%s": %s}}' % (field, literal)
        response = client.post('/api/analyze/text', data=body, content_type='application/json')
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'INVALID_BEHAVIOR'

    def test_internal_error(self, client, api, monkeypatch):
        def boom(text):
            raise RuntimeError('exploded')

        monkeypatch.setattr(api.ai_detector, 'analyze', boom)
        response = client.post('/api/analyze/text', json={'text': CASUAL_TEXT})
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Analysis failed: exploded'}


class TestAnalyzeFile:

    def test_txt_upload(self, client):
        response = upload(client, CASUAL_TEXT.encode('utf-8'), 'notes.txt')
        assert response.status_code == 200
        body = response.get_json()
        assert body['type'] == 'document'
        assert body['fileName'] == 'notes.txt'
        assert body['fileSize'] == len(CASUAL_TEXT.encode('utf-8'))
        assert body['aiProbability'] < 40

    def test_pdf_metadata(self, client):
        response = upload(client, b'%PDF-1.4\n/Author (Claude)\n%%EOF\n', 'report.pdf')
        body = response.get_json()
        assert response.status_code == 200
        assert body['aiProbability'] == 65
        assert body['confidence'] == 'High'

    def test_unsupported_type(self, client):
        response = upload(client, b'\x89PNG', 'photo.png')
        assert response.status_code == 400
        body = response.get_json()
        assert body['error'] == 'Unsupported file type'
        assert body['fileName'] == 'photo.png'

    def test_missing_file(self, client):
        response = client.post('/api/analyze/file', data={}, content_type='multipart/form-data')
        assert response.status_code == 400
        assert response.get_json()['error'] == 'No file uploaded'

    def test_oversize_file(self, client, api, monkeypatch):
        monkeypatch.setattr(api.config, 'MAX_FILE_SIZE', 16)
        response = upload(client, CASUAL_TEXT.encode('utf-8'), 'notes.txt')
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'FILE_TOO_LARGE'

    def test_rtf_upload(self, client):
        response = upload(client, b'{\\rtf1\\ansi Generated with ChatGPT}', 'draft.rtf')
        body = response.get_json()
        assert response.status_code == 200
        assert body['fileName'] == 'draft.rtf'
        assert body['aiProbability'] == 75
        assert body['confidence'] == 'High'
