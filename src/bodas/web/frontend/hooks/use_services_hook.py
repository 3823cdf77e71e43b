# bodas/web/frontend/hooks/use_services_hook.py
from typing import Any, Dict, Mapping, Optional

from ..api.api_client import APIClient
from ..api.resources import SERVICES
from ..state.app_context import use_api_client
from .use_resource_hook import select_items, use_resource_list, use_resource_mutation


def use_services(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """
    Servicios filtrados por `active` (se envía como isActive) y `category`.
    `data` es directamente la lista de servicios.
    """
    return use_resource_list(SERVICES, params, api_client, select=select_items)


def use_create_service(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def create(data):
        return await api_client.post(SERVICES.endpoint, data)

    mutation = use_resource_mutation(create, "Servicio creado correctamente")
    return {"create_service": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_update_service(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def update(service_id, data):
        return await api_client.put(SERVICES.item_path(service_id), data)

    mutation = use_resource_mutation(update, "Servicio actualizado correctamente")
    return {"update_service": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_delete_service(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def delete(service_id):
        return await api_client.delete(SERVICES.item_path(service_id))

    mutation = use_resource_mutation(delete, "Servicio eliminado correctamente")
    return {"delete_service": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}
