# bodas/web/frontend/hooks/use_resource_hook.py
"""
Piezas genéricas sobre las que se declaran las fachadas por recurso.

    use_resource_list:     esquema + filtros -> descriptor memorizado -> use_api_call
    use_resource_mutation: acción async + mensajes -> use_submit
"""

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from reactpy import use_memo

from ..api.api_client import APIClient
from ..api.resources import ResourceSchema
from ..state.app_context import use_api_client
from .mutation_runner import SubmitOptions
from .use_api_call_hook import use_api_call, use_submit


def use_resource_list(
    schema: ResourceSchema,
    params: Optional[Mapping[str, Any]] = None,
    api_client: Optional[APIClient] = None,
    select: Optional[Callable[[Dict[str, Any]], Any]] = None,
    debounce_ms: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Lista de un recurso filtrada por `params`.

    El descriptor se memoriza sobre los valores de los filtros, no sobre el dict
    que llega en cada render. Sin `select`, `data` es el sobre completo
    ({success, data, pagination}).
    """
    api_client = use_api_client(api_client)
    filters = dict(params or {})
    values = schema.dependency_values(filters)
    descriptor = use_memo(lambda: schema.build_query(filters), values)

    async def fetch():
        envelope = await api_client.get(descriptor.endpoint, descriptor.as_params())
        return select(envelope) if select else envelope

    return use_api_call(fetch, values, debounce_ms=debounce_ms)


def select_items(envelope: Dict[str, Any]) -> Any:
    """Sólo la lista `data` del sobre."""
    return envelope.get("data") or []


def use_resource_mutation(
    action: Callable[..., Awaitable[Any]],
    success_message: Optional[str] = None,
    error_message: Optional[str] = None,
    exclusive: bool = False,
) -> Dict[str, Any]:
    """
    Envuelve `action(*args)` en un envío con toasts.

    Returns:
        Dict con run(*args), loading y error.
    """
    mutation = use_submit(exclusive=exclusive)
    options = SubmitOptions(success_message=success_message, error_message=error_message)

    async def run(*args):
        return await mutation["submit"](lambda packed: action(*packed), args, options)

    return {"run": run, "loading": mutation["loading"], "error": mutation["error"]}
