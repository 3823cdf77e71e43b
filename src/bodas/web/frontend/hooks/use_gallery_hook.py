# bodas/web/frontend/hooks/use_gallery_hook.py
"""
Hooks CRUD de la galería.

La administración trabaja sobre /api/admin/gallery; la portada pública lee
/api/gallery. Las altas se validan antes de llegar al backend.
"""

from typing import Any, Dict, Mapping, Optional

from ..api.api_client import APIClient
from ..api.resources import GALLERY, PUBLIC_GALLERY
from ..state.app_context import use_api_client
from ..utils.validation import ensure_valid, validate_gallery_data
from .use_resource_hook import select_items, use_resource_list, use_resource_mutation


def use_galleries(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """Lista paginada de imágenes (data es el sobre completo)."""
    query = use_resource_list(GALLERY, params, api_client)
    envelope = query["data"] or {}
    return {**query, "items": envelope.get("data") or [], "pagination": envelope.get("pagination")}


def use_public_gallery(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    return use_resource_list(PUBLIC_GALLERY, params, api_client, select=select_items)


def use_create_gallery(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def create(data):
        ensure_valid(validate_gallery_data(data))
        return await api_client.post(GALLERY.endpoint, data)

    mutation = use_resource_mutation(create, "Imagen añadida a la galería")
    return {"create_gallery": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_update_gallery(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def update(gallery_id, data):
        return await api_client.put(GALLERY.item_path(gallery_id), data)

    mutation = use_resource_mutation(update, "Imagen actualizada correctamente")
    return {"update_gallery": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_delete_gallery(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def delete(gallery_id):
        return await api_client.delete(GALLERY.item_path(gallery_id))

    mutation = use_resource_mutation(delete, "Imagen eliminada de la galería")
    return {"delete_gallery": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}
