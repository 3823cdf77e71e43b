# bodas/web/dependencies.py
from typing import Optional

from .frontend.api.api_client import APIClient, get_api_client


class APIClientDependencyProvider:
    """
    Contenedor del cliente API compartido.

    `create_app` lo rellena una vez al inicio; el componente raíz de ReactPy y los
    endpoints de FastAPI lo leen desde aquí. Sin cliente inyectado se usa la
    instancia configurada desde el entorno.
    """

    def __init__(self):
        self._api_client: Optional[APIClient] = None

    def set_api_client(self, api_client: Optional[APIClient]):
        self._api_client = api_client

    def get_api_client(self) -> APIClient:
        if self._api_client is None:
            self._api_client = get_api_client()
        return self._api_client

    def reset(self):
        self._api_client = None


api_client_provider = APIClientDependencyProvider()
get_shared_api_client = api_client_provider.get_api_client
