# bodas/web/frontend/state/app_context.py
"""
Contexto global de la aplicación para inyección de dependencias.

La raíz de composición (App) crea las dependencias compartidas una sola vez y
las publica aquí; los hooks las leen del contexto y aceptan un argumento para
sustituirlas en los tests.

Uso:
    # En app.py (componente raíz)
    context_value = {"api_client": api_client, "promotion_source": promotion_source}
    return AppContext(children, value=context_value)

    # En hooks
    api_client = use_api_client()
"""

import logging
from typing import Any, Dict, Optional

from reactpy import create_context, use_context

from ..api.api_client import APIClient, get_api_client
from ..api.data_sources import ApiPromotionSource, PromotionSource

logger = logging.getLogger(__name__)

AppContext = create_context({})


def use_app_context() -> Dict[str, Any]:
    """Dependencias compartidas de la aplicación (dict vacío fuera de un AppContext)."""
    return use_context(AppContext) or {}


def use_api_client(api_client: Optional[APIClient] = None) -> APIClient:
    """
    Cliente API a usar por un hook: el inyectado, el del contexto o, como último
    recurso, la instancia compartida configurada desde el entorno.
    """
    # Los hooks deben llamarse siempre, en el mismo orden, aunque haya inyección
    app_context = use_app_context()
    if api_client is not None:
        return api_client
    api_client = app_context.get("api_client")
    if api_client is None:
        logger.debug("Sin api_client en el contexto; se usa get_api_client()")
        api_client = get_api_client()
    return api_client


def use_promotion_source(source: Optional[PromotionSource] = None) -> PromotionSource:
    """Fuente de promociones elegida por la raíz de composición."""
    app_context = use_app_context()
    if source is not None:
        return source
    source = app_context.get("promotion_source")
    if source is None:
        api_client = app_context.get("api_client") or get_api_client()
        source = ApiPromotionSource(api_client)
    return source


def use_frontend_config() -> Dict[str, Any]:
    """Ajustes del frontend (debounce, tamaños de página, etc.) publicados por la App."""
    return use_app_context().get("frontend_config") or {}
