from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from candyboard import create_app, get_store
from candyboard.client import ApiClient, UserStorage
from config import TestConfig

BASE_URL = "http://candy.test/api"


class FlaskTransportAdapter(BaseAdapter):
    """Routes requests.Session traffic into a Flask test client instead of the network."""

    def __init__(self, test_client):
        super().__init__()
        self.test_client = test_client
        self.calls = []

    def send(self, request, **kwargs):
        parts = urlsplit(request.url)
        path = parts.path + (f"?{parts.query}" if parts.query else "")
        headers = {k: v for k, v in request.headers.items()
                   if k.lower() not in ("content-type", "content-length", "host")}
        self.calls.append((request.method, path))

        flask_resp = self.test_client.open(
            path,
            method=request.method,
            data=request.body,
            headers=headers,
            content_type=request.headers.get("Content-Type"))

        response = requests.Response()
        response.status_code = flask_resp.status_code
        response._content = flask_resp.get_data()
        response.headers = CaseInsensitiveDict(flask_resp.headers)
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def store(app):
    with app.app_context():
        yield get_store()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def transport(client):
    return FlaskTransportAdapter(client)


@pytest.fixture
def storage(tmp_path):
    return UserStorage(tmp_path / "user.json")


@pytest.fixture
def api(transport, storage):
    session = requests.Session()
    session.mount("http://candy.test/", transport)
    sleeps = []
    api_client = ApiClient(BASE_URL, storage=storage, session=session, sleep=sleeps.append)
    api_client.sleeps = sleeps
    return api_client
