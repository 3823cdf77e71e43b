# bodas/web/frontend/hooks/use_reviews_hook.py
from typing import Any, Dict, Mapping, Optional

from ..api.api_client import APIClient
from ..api.resources import PUBLIC_REVIEWS, REVIEWS
from ..state.app_context import use_api_client
from ..utils.validation import ensure_valid, validate_review_data
from .use_resource_hook import select_items, use_resource_list, use_resource_mutation


def use_reviews(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """
    Lista paginada de reseñas para la administración.

    Args:
        params: Filtros lógicos (search, rating, page, limit).
    """
    query = use_resource_list(REVIEWS, params, api_client)
    envelope = query["data"] or {}
    return {**query, "reviews": envelope.get("data") or [], "pagination": envelope.get("pagination")}


def use_public_reviews(limit: Optional[int] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    return use_resource_list(PUBLIC_REVIEWS, {"limit": limit}, api_client, select=select_items)


def use_create_review(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def create(data):
        ensure_valid(validate_review_data(data))
        return await api_client.post(REVIEWS.endpoint, data)

    mutation = use_resource_mutation(create, "Reseña creada correctamente")
    return {"create_review": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_update_review(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def update(review_id, data):
        return await api_client.put(REVIEWS.item_path(review_id), data)

    mutation = use_resource_mutation(update, "Reseña actualizada correctamente")
    return {"update_review": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_delete_review(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def delete(review_id):
        return await api_client.delete(REVIEWS.item_path(review_id))

    mutation = use_resource_mutation(delete, "Reseña eliminada correctamente")
    return {"delete_review": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}
