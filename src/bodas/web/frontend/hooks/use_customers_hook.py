# bodas/web/frontend/hooks/use_customers_hook.py
from typing import Any, Dict, Mapping, Optional

from ..api.api_client import APIClient
from ..api.resources import APPOINTMENTS, CUSTOMERS
from .use_resource_hook import use_resource_list


def _with_items(query: Dict[str, Any], key: str) -> Dict[str, Any]:
    envelope = query["data"] or {}
    return {**query, key: envelope.get("data") or [], "pagination": envelope.get("pagination")}


def use_appointments(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    """Citas filtradas por status, type, date y search, paginadas."""
    return _with_items(use_resource_list(APPOINTMENTS, params, api_client), "appointments")


def use_customers(params: Optional[Mapping[str, Any]] = None, api_client: Optional[APIClient] = None) -> Dict[str, Any]:
    return _with_items(use_resource_list(CUSTOMERS, params, api_client), "customers")
