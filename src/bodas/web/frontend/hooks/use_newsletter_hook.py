# bodas/web/frontend/hooks/use_newsletter_hook.py
from typing import Any, Dict, Optional

from ..api.api_client import APIClient
from ..api.resources import NEWSLETTER
from ..state.app_context import use_api_client
from ..utils.validation import ensure_valid, validate_newsletter_email
from .use_resource_hook import use_resource_mutation


def use_newsletter_subscribe(api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """Suscripción al boletín con un único campo: el correo."""
    api_client = use_api_client(api_client)

    async def subscribe(email: str):
        ensure_valid(validate_newsletter_email(email))
        response = await api_client.post(NEWSLETTER.endpoint, {"email": email.strip()})
        return {"success": response.get("success", True)}

    mutation = use_resource_mutation(subscribe, "¡Suscripción realizada con éxito!")
    return {"subscribe": mutation["run"], "loading": mutation["loading"], "error": mutation["error"]}
