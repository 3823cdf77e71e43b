# bodas/web/frontend/utils/pagination.py
"""
Cálculos de paginación puros.

Una página fuera de rango se recorta siempre al rango válido [1, páginas], tanto
al paginar listas locales como al pintar los controles.
"""

import math
from typing import Any, Dict, List, Optional, Sequence, Tuple


def compute_total_pages(total: int, limit: int) -> int:
    """Número de páginas para `total` elementos de `limit` en `limit` (0 si no hay elementos)."""
    if limit <= 0:
        raise ValueError("limit debe ser mayor que cero")
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def clamp_page(page: Optional[int], total_pages: int) -> int:
    """Ajusta `page` al rango [1, total_pages]. Con cero páginas retorna 1."""
    if not page or page < 1:
        return 1
    return min(page, max(total_pages, 1))


def paginate(items: Sequence[Any], page: Optional[int], limit: int) -> Tuple[List[Any], Dict[str, int]]:
    """
    Retorna los elementos de la página pedida y la info de paginación con la
    misma forma que el sobre del backend: {page, limit, total, pages}.
    """
    total = len(items)
    pages = compute_total_pages(total, limit)
    current = clamp_page(page, pages)
    start = (current - 1) * limit
    return list(items[start : start + limit]), {"page": current, "limit": limit, "total": total, "pages": pages}


def should_paginate(pagination: Optional[Dict[str, Any]]) -> bool:
    """Los controles de paginación sólo se muestran si hay más de una página."""
    if not pagination:
        return False
    return int(pagination.get("pages") or 0) > 1
