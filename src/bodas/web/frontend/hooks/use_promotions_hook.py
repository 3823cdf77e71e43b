# bodas/web/frontend/hooks/use_promotions_hook.py
"""
Hooks de promociones.

`use_promotions` es la lectura pública: la fuente de datos (API real o datos de
demostración) la decide la raíz de composición y llega por contexto o por
argumento. `use_promotions_admin` concentra filtros, paginación y CRUD de la
pantalla de administración.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from reactpy import use_state

from ..api.api_client import APIClient
from ..api.data_sources import PromotionSource
from ..api.resources import PROMOTIONS, PROMOTIONS_ADMIN
from ..state.app_context import use_api_client, use_frontend_config, use_promotion_source
from ..utils.pagination import clamp_page
from .mutation_runner import SubmitOptions
from .use_api_call_hook import use_api_call, use_submit
from .use_resource_hook import use_resource_list

logger = logging.getLogger(__name__)

PROMOTIONS_DEBOUNCE_MS = 500

DEFAULT_ADMIN_FILTERS = {
    "page": 1,
    "limit": 10,
    "status": "all",
    "type": "all",
    "target_page": "all",
}


def use_promotions(
    params: Optional[Mapping[str, Any]] = None, source: Optional[PromotionSource] = None
) -> Dict[str, Any]:
    """
    Promociones filtradas por `active` y `limit`. `data` es la lista.

    Args:
        params: Filtros lógicos (active, limit).
        source: Fuente opcional; por defecto la del contexto de la aplicación.
    """
    frontend_config = use_frontend_config()
    source = use_promotion_source(source)
    filters = dict(params or {})
    debounce_ms = frontend_config.get("promotions_debounce_ms", PROMOTIONS_DEBOUNCE_MS)

    async def fetch():
        return await source.fetch_promotions(filters)

    return use_api_call(fetch, PROMOTIONS.dependency_values(filters), debounce_ms=debounce_ms)


def use_promotions_admin(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """
    Gestión completa de promociones (filtros, paginación y CRUD con refresco).

    Returns:
        Dict con las siguientes keys:
            - promotions: List[Dict] - Promociones de la página actual
            - pagination: Optional[Dict] - {page, limit, total, pages}
            - loading: bool - Cargando la lista o enviando un cambio
            - error: Optional[str] - Último error de lectura o escritura
            - filters / set_filters / set_page
            - refresh, create_promotion, update_promotion, delete_promotion,
              delete_multiple_promotions
    """
    api_client = use_api_client(api_client)
    filters, set_filters = use_state(DEFAULT_ADMIN_FILTERS)
    query = use_resource_list(PROMOTIONS_ADMIN, filters, api_client)
    mutation = use_submit()

    envelope = query["data"] or {}
    pagination = envelope.get("pagination")
    refetch = query["refetch"]

    def set_page(page: int):
        total_pages = (pagination or {}).get("pages") or 1
        set_filters(lambda current: {**current, "page": clamp_page(page, total_pages)})

    async def _mutate_and_refresh(action, success_message):
        result = await mutation["submit"](lambda _: action(), None, SubmitOptions(success_message=success_message))
        try:
            await refetch()
        except Exception as e:
            # La escritura ya se aplicó; el fallo del refresco queda en el estado de la lista
            logger.debug(f"Refresco de promociones tras escribir fallido: {e}")
        return result

    async def create_promotion(data: Dict[str, Any]):
        return await _mutate_and_refresh(
            lambda: api_client.post(PROMOTIONS_ADMIN.endpoint, data), "Promoción creada correctamente"
        )

    async def update_promotion(promotion_id: str, data: Dict[str, Any]):
        return await _mutate_and_refresh(
            lambda: api_client.put(PROMOTIONS_ADMIN.item_path(promotion_id), data),
            "Promoción actualizada correctamente",
        )

    async def delete_promotion(promotion_id: str):
        return await _mutate_and_refresh(
            lambda: api_client.delete(PROMOTIONS_ADMIN.item_path(promotion_id)), "Promoción eliminada correctamente"
        )

    async def delete_multiple_promotions(ids: List[str]):
        return await _mutate_and_refresh(
            lambda: api_client.delete(PROMOTIONS_ADMIN.endpoint, {"ids": list(ids)}),
            f"{len(ids)} promociones eliminadas",
        )

    return {
        "promotions": envelope.get("data") or [],
        "pagination": pagination,
        "loading": query["loading"] or mutation["loading"],
        "error": mutation["error"] or query["error"],
        "filters": filters,
        "set_filters": set_filters,
        "set_page": set_page,
        "refresh": refetch,
        "create_promotion": create_promotion,
        "update_promotion": update_promotion,
        "delete_promotion": delete_promotion,
        "delete_multiple_promotions": delete_multiple_promotions,
    }
