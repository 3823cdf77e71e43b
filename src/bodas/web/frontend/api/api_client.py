# bodas/web/frontend/api/api_client.py
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from bodas.common.config_manager import ConfigManager

from ..utils.exceptions import APIConnectionException, APIException

logger = logging.getLogger(__name__)

GENERIC_API_ERROR = "La solicitud a la API falló"
INVALID_RESPONSE_ERROR = "La respuesta del servidor no es un JSON válido"


def clean_query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Prepara los parámetros de consulta: descarta None y cadenas vacías y
    serializa los booleanos como "true"/"false". Se preserva el orden.
    """
    if not params:
        return {}
    cleaned: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        cleaned[key] = str(value).lower() if isinstance(value, bool) else value
    return cleaned


class APIClient:
    """
    Cliente del backend JSON del sitio.

    Traduce (método, ruta, parámetros o cuerpo) en una llamada HTTP y devuelve el
    sobre {success, data, error, pagination} tal cual. Cualquier fallo se lanza como
    `APIException`. No reintenta ni cachea.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:3000",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        json_data: Any = None,
    ) -> Dict[str, Any]:
        client = self._get_client()
        try:
            response = await client.request(
                method=method, url=endpoint, params=clean_query_params(params) or None, json=json_data
            )
        except httpx.RequestError as e:
            logger.warning(f"Error de conexión en {method} {endpoint}: {e}")
            raise APIConnectionException() from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = self._server_message(data) or f"{GENERIC_API_ERROR} (HTTP {response.status_code})"
            logger.warning(f"{method} {endpoint} respondió {response.status_code}: {message}")
            raise APIException(message, status_code=response.status_code, details=self._details(data))

        if not isinstance(data, dict):
            logger.error(f"{method} {endpoint} devolvió un cuerpo no válido: {response.text[:200]!r}")
            raise APIException(INVALID_RESPONSE_ERROR, status_code=response.status_code)

        if data.get("success") is False:
            message = self._server_message(data) or GENERIC_API_ERROR
            logger.warning(f"{method} {endpoint} respondió success=false: {message}")
            raise APIException(message, status_code=response.status_code, details=data.get("details"))

        return data

    @staticmethod
    def _server_message(data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        return data.get("error") or data.get("message") or None

    @staticmethod
    def _details(data: Any) -> Any:
        return data.get("details") if isinstance(data, dict) else None

    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any = None) -> Dict[str, Any]:
        return await self._request("POST", endpoint, json_data=data)

    async def put(self, endpoint: str, data: Any = None) -> Dict[str, Any]:
        return await self._request("PUT", endpoint, json_data=data)

    async def delete(self, endpoint: str, data: Any = None) -> Dict[str, Any]:
        """DELETE; `data` sólo lo usa el borrado múltiple de promociones."""
        return await self._request("DELETE", endpoint, json_data=data)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


_api_client_instance: Optional[APIClient] = None


def get_api_client() -> APIClient:
    """
    Instancia compartida, configurada desde el entorno.

    Sólo es el último recurso de los hooks cuando no hay un cliente en el
    contexto de la aplicación.
    """
    global _api_client_instance
    if _api_client_instance is None:
        config = ConfigManager.get_api_client_config()
        _api_client_instance = APIClient(base_url=config["base_url"], timeout=config["timeout"])
    return _api_client_instance
