# bodas/web/frontend/hooks/use_settings_hook.py
"""
Hooks de ajustes generales e informes.

Los ajustes siempre tienen todos sus campos: lo que el backend no devuelve (o
todo, si la lectura falla) se completa con los valores por defecto de
`GeneralSettings`.
"""

import logging
from typing import Any, Dict, Optional

from ..api.api_client import APIClient
from ..api.resources import GENERAL_SETTINGS, REPORTS
from ..api.schemas import GeneralSettings
from ..state.app_context import use_api_client
from .use_api_call_hook import use_api_call
from .use_resource_hook import use_resource_list, use_resource_mutation

logger = logging.getLogger(__name__)

DEFAULT_REPORT_PERIOD = "month"


def merge_settings(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Valores por defecto sobrescritos por los campos no nulos recibidos."""
    merged = GeneralSettings().model_dump()
    merged.update({key: value for key, value in (data or {}).items() if value is not None})
    return merged


def use_general_settings(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """
    Returns:
        Dict con settings (siempre completo), loading, error, update_settings y
        refetch_settings.
    """
    api_client = use_api_client(api_client)

    async def fetch_settings():
        envelope = await api_client.get(GENERAL_SETTINGS.endpoint)
        return merge_settings(envelope.get("data"))

    query = use_api_call(fetch_settings, [], debounce_ms=0)
    refetch = query["refetch"]

    async def save(data):
        # Los metadatos del documento no se envían
        payload = {k: v for k, v in data.items() if k not in ("_id", "createdAt", "updatedAt")}
        envelope = await api_client.put(GENERAL_SETTINGS.endpoint, payload)
        return merge_settings(envelope.get("data"))

    mutation = use_resource_mutation(save, "Ajustes guardados correctamente")

    async def update_settings(data: Dict[str, Any]) -> Dict[str, Any]:
        result = await mutation["run"](data)
        try:
            await refetch()
        except Exception as e:
            logger.debug(f"Relectura de ajustes tras guardar fallida: {e}")
        return result

    return {
        "settings": query["data"] or merge_settings(None),
        "loading": query["loading"] or mutation["loading"],
        "error": mutation["error"] or query["error"],
        "update_settings": update_settings,
        "refetch_settings": refetch,
    }


def use_reports(period: str = DEFAULT_REPORT_PERIOD, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """Informe agregado del periodo (`week`, `month`, `year`). `data` es el contenido del informe."""
    return use_resource_list(REPORTS, {"period": period}, api_client, select=lambda envelope: envelope.get("data"))
