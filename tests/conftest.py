import pytest
import requests

from app import create_app


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, text=None):
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            raise requests.exceptions.JSONDecodeError('Expecting value', self._text, 0)
        return self._payload


def success_payload(ip='203.0.113.7', city='Lisbon', country='Portugal'):
    return {'status': 'success', 'query': ip, 'city': city, 'country': country}


@pytest.fixture
def app():
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upstream(monkeypatch):
    """Patch the outbound GET; set ``upstream.response`` or ``upstream.error``."""

    class Upstream:
        response = FakeResponse(success_payload())
        error = None
        calls = []

        def get(self, url, timeout=None):
            self.calls.append((url, timeout))
            if self.error is not None:
                raise self.error
            return self.response

    fake = Upstream()
    fake.calls = []
    monkeypatch.setattr('geolocation.requests.get', fake.get)
    return fake
