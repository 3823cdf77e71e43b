# bodas/web/frontend/api/resources.py
"""
Esquemas declarativos de los recursos del backend.

Cada recurso declara su endpoint y cómo se traduce cada filtro lógico de la UI
(nombre, valor) a un parámetro de consulta del backend (clave, valor). Las
fachadas de hooks se reducen a elegir un esquema; ninguna traduce parámetros a mano.

Uso:
    descriptor = BOOKINGS.build_query({"status": "pending", "search": "Nguyen", "page": 1, "limit": 10})
    envelope = await api_client.get(descriptor.endpoint, descriptor.as_params())
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


def to_flag(value: Any) -> Optional[str]:
    """bool -> "true"/"false", que es lo que esperan los filtros booleanos del backend."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.lower()
    return "true" if value else "false"


def skip_all(value: Any) -> Any:
    """El valor "all" de los selectores de la UI significa "sin filtro"."""
    return None if value == "all" else value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class QueryDescriptor:
    """
    Identifica una lectura lógica: endpoint + parámetros ya traducidos.

    Es inmutable y se compara por valor, así que dos descriptores construidos en
    renders distintos con los mismos filtros son iguales.
    """

    endpoint: str
    params: Tuple[Tuple[str, Any], ...] = ()

    def as_params(self) -> Dict[str, Any]:
        return dict(self.params)


@dataclass(frozen=True)
class ParamSpec:
    """Filtro lógico `name` -> parámetro `key` del backend, con transformación opcional del valor."""

    name: str
    key: Optional[str] = None
    transform: Optional[Callable[[Any], Any]] = None

    @property
    def query_key(self) -> str:
        return self.key or self.name

    def to_query_value(self, value: Any) -> Any:
        if self.transform is not None:
            value = self.transform(value)
        return value


@dataclass(frozen=True)
class ResourceSchema:
    endpoint: str
    params: Tuple[ParamSpec, ...] = field(default_factory=tuple)

    def build_query(self, filters: Optional[Mapping[str, Any]] = None) -> QueryDescriptor:
        """
        Traduce los filtros lógicos a un descriptor. Los valores vacíos se omiten y
        el orden de los parámetros es el de la declaración del esquema.
        """
        filters = filters or {}
        known = {spec.name for spec in self.params}
        unknown = [name for name in filters if name not in known]
        if unknown:
            logger.debug(f"Filtros ignorados para {self.endpoint}: {unknown}")

        pairs = []
        for spec in self.params:
            value = filters.get(spec.name)
            if _is_empty(value):
                continue
            value = spec.to_query_value(value)
            if _is_empty(value):
                continue
            pairs.append((spec.query_key, value))
        return QueryDescriptor(endpoint=self.endpoint, params=tuple(pairs))

    def dependency_values(self, filters: Optional[Mapping[str, Any]] = None) -> List[Any]:
        """
        Valores primitivos de los filtros, uno por parámetro declarado y siempre en
        el mismo orden. Sirven como dependencias de los hooks, que se comparan por
        valor y no por la identidad del dict de filtros.
        """
        filters = filters or {}
        return [filters.get(spec.name) for spec in self.params]

    def item_path(self, item_id: Any) -> str:
        return f"{self.endpoint}/{item_id}"


# --- Parámetros comunes ---
PAGE = ParamSpec("page")
LIMIT = ParamSpec("limit")
SEARCH = ParamSpec("search")
STATUS = ParamSpec("status")

# --- Recursos ---
BOOKINGS = ResourceSchema("/api/bookings", (STATUS, ParamSpec("date"), SEARCH, PAGE, LIMIT))
APPOINTMENTS = ResourceSchema(
    "/api/appointments", (STATUS, ParamSpec("type"), ParamSpec("date"), SEARCH, PAGE, LIMIT)
)
CUSTOMERS = ResourceSchema("/api/customers", (STATUS, SEARCH, PAGE, LIMIT))
SERVICES = ResourceSchema(
    "/api/services",
    (ParamSpec("active", key="isActive", transform=to_flag), ParamSpec("category"), SEARCH, PAGE, LIMIT),
)
GALLERY = ResourceSchema("/api/admin/gallery", (SEARCH, PAGE, LIMIT))
PUBLIC_GALLERY = ResourceSchema("/api/gallery", (ParamSpec("category"), LIMIT))
REVIEWS = ResourceSchema("/api/admin/reviews", (SEARCH, ParamSpec("rating"), PAGE, LIMIT))
PUBLIC_REVIEWS = ResourceSchema("/api/reviews", (LIMIT,))
PROMOTIONS = ResourceSchema("/api/promotions", (ParamSpec("active", transform=to_flag), LIMIT))
PROMOTIONS_ADMIN = ResourceSchema(
    "/api/promotions",
    (
        SEARCH,
        ParamSpec("status", transform=skip_all),
        ParamSpec("type", transform=skip_all),
        ParamSpec("target_page", key="targetPage", transform=skip_all),
        PAGE,
        LIMIT,
    ),
)
REPORTS = ResourceSchema("/api/reports", (ParamSpec("period"),))
GENERAL_SETTINGS = ResourceSchema("/api/settings/general")
CONTACT = ResourceSchema("/api/contact")
NEWSLETTER = ResourceSchema("/api/newsletter")
