# bodas/web/frontend/hooks/use_bookings_hook.py
"""
Hooks para las reservas de consulta y el formulario de contacto.

Siguen el principio de Inyección de Dependencias: todos aceptan `api_client`
opcional; si no se pasa, se toma del contexto de la aplicación.
"""

from typing import Any, Dict, Mapping, Optional

from ..api.api_client import APIClient
from ..api.resources import BOOKINGS, CONTACT
from ..api.schemas import ContactForm
from ..state.app_context import use_api_client
from ..utils.mappers import map_booking_form
from .use_api_call_hook import use_real_time_data
from .use_resource_hook import use_resource_list, use_resource_mutation

BOOKING_SUCCESS_MESSAGE = (
    "¡Reserva realizada con éxito! Nuestro equipo te contactará pronto "
    "y recibirás un correo de confirmación."
)
CONTACT_SUCCESS_MESSAGE = "¡Mensaje enviado con éxito! Te responderemos lo antes posible."


def use_bookings(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """
    Lista paginada de reservas.

    Args:
        params: Filtros lógicos (status, date, search, page, limit).
        api_client: Cliente API opcional para inyección de dependencias.

    Returns:
        Dict con data (el sobre completo), bookings, pagination, loading, error,
        execute y refetch.
    """
    query = use_resource_list(BOOKINGS, params, api_client)
    envelope = query["data"] or {}
    return {
        **query,
        "bookings": envelope.get("data") or [],
        "pagination": envelope.get("pagination"),
    }


def use_create_booking(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def create(data):
        return await api_client.post(BOOKINGS.endpoint, data)

    mutation = use_resource_mutation(create, "Reserva creada correctamente")
    return {"create_booking": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_update_booking(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def update(booking_id, data):
        return await api_client.put(BOOKINGS.item_path(booking_id), data)

    mutation = use_resource_mutation(update, "Reserva actualizada correctamente")
    return {"update_booking": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_delete_booking(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def delete(booking_id):
        return await api_client.delete(BOOKINGS.item_path(booking_id))

    mutation = use_resource_mutation(delete, "Reserva eliminada correctamente")
    return {"delete_booking": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_booking_submit(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """
    Envío del formulario público de reserva.

    El formulario (name, phone, email, date, time, service, message) se traduce al
    esquema del backend antes de enviarlo. `email` y `service` no viajan: el
    correo de confirmación lo gestiona el backend por su cuenta.
    Un segundo envío mientras el primero sigue en curso se rechaza.
    """
    api_client = use_api_client(api_client)

    async def submit_booking(form):
        payload = map_booking_form(form)
        response = await api_client.post(BOOKINGS.endpoint, payload)
        return {"data": response.get("data")}

    mutation = use_resource_mutation(submit_booking, BOOKING_SUCCESS_MESSAGE, exclusive=True)
    return {"submit_booking": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_contact_submit(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    api_client = use_api_client(api_client)

    async def submit_contact(data):
        payload = ContactForm.model_validate(dict(data)).model_dump(exclude_none=True)
        response = await api_client.post(CONTACT.endpoint, payload)
        return {"data": response.get("data")}

    mutation = use_resource_mutation(submit_contact, CONTACT_SUCCESS_MESSAGE)
    return {"submit_contact": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}


def use_pending_bookings_count(
    interval_seconds: Optional[float] = 30, api_client: Optional[APIClient] = None
) -> Dict[str, Any]:
    """
    Número de reservas pendientes, refrescado cada `interval_seconds`.

    Sólo se pide una fila: el total llega en la paginación del sobre.
    """
    api_client = use_api_client(api_client)

    async def fetch_pending_total():
        descriptor = BOOKINGS.build_query({"status": "pending", "page": 1, "limit": 1})
        envelope = await api_client.get(descriptor.endpoint, descriptor.as_params())
        return int((envelope.get("pagination") or {}).get("total") or 0)

    return use_real_time_data(fetch_pending_total, interval_seconds, [])
