"""
Shared fixtures: a fake Canva upstream wired in through the HTTP client dependency.
"""
# Configure the environment BEFORE importing the app (settings load at import time)
import os

os.environ["CANVA_CLIENT_ID"] = "client-id"
os.environ["CANVA_CLIENT_SECRET"] = "client-secret"
os.environ["BASE_URL"] = "http://bridge.test"
os.environ["REDIRECT_URI"] = "http://bridge.test/oauth/callback"
os.environ["SESSION_SECRET"] = "test-session-secret"

from typing import Callable, Dict, List, Tuple, Union
from urllib.parse import parse_qs, urlparse

import httpx
import pytest
from fastapi.testclient import TestClient

from canva_bridge.core.http import get_http_client
from canva_bridge.main import app

Responder = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]

API_ROOT = "https://api.canva.com/rest/v1"


class FakeCanva:
    """Records every outbound request and answers from registered routes"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Responder] = {}

    def add(self, method: str, path: str, responder: Responder) -> None:
        self.routes[(method, path)] = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/rest/v1"):
            path = path[len("/rest/v1"):]
        responder = self.routes.get((request.method, path))
        if responder is None:
            return httpx.Response(404, json={"code": "not_found"})
        if callable(responder):
            return responder(request)
        return responder


@pytest.fixture
def upstream():
    return FakeCanva()


@pytest.fixture
def client(upstream):
    async def override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler), timeout=5.0) as http:
            yield http

    app.dependency_overrides[get_http_client] = override_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def start_login(client: TestClient) -> Dict[str, str]:
    """Hit /oauth/login and return the authorize URL query parameters"""
    response = client.get("/oauth/login", follow_redirects=False)
    assert response.status_code == 302
    query = parse_qs(urlparse(response.headers["location"]).query)
    return {key: values[0] for key, values in query.items()}


@pytest.fixture
def authenticated_client(client, upstream):
    upstream.add(
        "POST",
        "/oauth/token",
        httpx.Response(
            200,
            json={"access_token": "access-123", "refresh_token": "refresh-456", "expires_in": 3600},
        ),
    )
    params = start_login(client)
    response = client.get("/oauth/callback", params={"code": "auth-code", "state": params["state"]})
    assert response.status_code == 200
    upstream.requests.clear()
    return client
