"""Tests para la aplicación FastAPI que sirve la interfaz web."""

import httpx
import pytest
from fastapi.testclient import TestClient

from bodas import __version__
from bodas.web.dependencies import api_client_provider
from bodas.web.frontend.api.api_client import APIClient
from bodas.web.main import create_app


@pytest.fixture
def client():
    """Cliente de prueba de FastAPI con un cliente API inyectado, adaptado para Lifespan."""
    api_client = APIClient(
        base_url="http://backend.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"success": True})),
    )
    app = create_app(api_client=api_client)
    with TestClient(app) as test_client:
        yield test_client
    api_client_provider.reset()


class TestWebApp:
    def test_health_endpoint(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__, "api_base_url": "http://backend.test"}

    def test_static_css_is_served(self, client: TestClient):
        response = client.get("/static/custom.css")
        assert response.status_code == 200
        assert ".toast" in response.text

    def test_provider_falls_back_to_environment_client(self):
        api_client_provider.reset()
        try:
            assert api_client_provider.get_api_client().base_url == "http://backend.test"
        finally:
            api_client_provider.reset()
