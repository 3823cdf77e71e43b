# bodas/web/frontend/api/data_sources.py
"""
Fuentes de datos de promociones.

La raíz de composición (App) elige la fuente y la publica en el contexto de la
aplicación; `use_promotions` nunca decide por sí mismo de dónde salen los datos.
"""

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence

from .api_client import APIClient
from .resources import PROMOTIONS, to_flag

logger = logging.getLogger(__name__)

DEFAULT_MOCK_PROMOTIONS: List[Dict[str, Any]] = [
    {
        "_id": "1",
        "title": "Promoción bodas de primavera",
        "description": "20% de descuento en el paquete de boda completo",
        "discount": 20,
        "discountType": "percentage",
        "validFrom": "2024-03-01",
        "validTo": "2024-05-31",
        "isActive": True,
    },
    {
        "_id": "2",
        "title": "Combo decoración + fotografía",
        "description": "Ahorra un 15% al contratar el combo",
        "discount": 15,
        "discountType": "percentage",
        "validFrom": "2024-01-01",
        "validTo": "2024-12-31",
        "isActive": True,
    },
]


class PromotionSource(Protocol):
    async def fetch_promotions(self, filters: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Retorna las promociones que cumplen los filtros lógicos `active` y `limit`."""
        ...


class ApiPromotionSource:
    """Promociones desde GET /api/promotions."""

    def __init__(self, api_client: APIClient):
        self.api_client = api_client

    async def fetch_promotions(self, filters: Mapping[str, Any]) -> List[Dict[str, Any]]:
        descriptor = PROMOTIONS.build_query(filters)
        envelope = await self.api_client.get(descriptor.endpoint, descriptor.as_params())
        return envelope.get("data") or []


class InMemoryPromotionSource:
    """Promociones de demostración con una latencia simulada."""

    def __init__(self, promotions: Optional[Sequence[Dict[str, Any]]] = None, delay_ms: int = 300):
        self.promotions = list(DEFAULT_MOCK_PROMOTIONS if promotions is None else promotions)
        self.delay_ms = delay_ms

    async def fetch_promotions(self, filters: Mapping[str, Any]) -> List[Dict[str, Any]]:
        if self.delay_ms:
            await asyncio.sleep(self.delay_ms / 1000)

        result = self.promotions
        active = filters.get("active")
        if active is not None:
            wanted = to_flag(active)
            result = [p for p in result if to_flag(p.get("isActive") or False) == wanted]
        limit = filters.get("limit")
        if limit:
            result = result[: int(limit)]
        logger.debug(f"Promociones de demostración servidas: {len(result)}")
        return list(result)
