# bodas/web/frontend/shared/formatters.py
"""
Funciones de formateo compartidas para el sitio de bodas.

Fechas, horas, estados de reserva, puntuaciones y precios tal como se muestran
en tablas y tarjetas.
"""

from datetime import date, datetime
from typing import Any, Optional, Union

BOOKING_STATUS_LABELS = {
    "pending": "Pendiente",
    "confirmed": "Confirmada",
    "consulted": "Consultada",
    "cancelled": "Cancelada",
}

BOOKING_STATUS_CLASSES = {
    "pending": "tag tag-pending",
    "confirmed": "tag tag-confirmed",
    "consulted": "tag tag-consulted",
    "cancelled": "tag secondary",
}


def format_time(hora: Optional[str]) -> str:
    """
    Formatea la hora como HH:MM (sin segundos).

    Args:
        hora: String de hora en formato 'HH:MM' o 'HH:MM:SS', o None

    Returns:
        String formateado como 'HH:MM' o '-' si es None/vacío
    """
    if not hora:
        return "-"
    return str(hora)[:5]


def format_date(value: Union[str, date, datetime, None]) -> str:
    """
    Fecha en formato DD/MM/AAAA.

    Acepta fechas ISO ('2024-06-15' o '2024-06-15T10:00:00.000Z'); si el texto no
    se puede interpretar se devuelve tal cual.
    """
    if not value:
        return "-"
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    text = str(value)
    try:
        parsed = datetime.strptime(text[:10], "%Y-%m-%d")
    except ValueError:
        return text
    return parsed.strftime("%d/%m/%Y")


def format_booking_status(status: Optional[str]) -> str:
    if not status:
        return "-"
    return BOOKING_STATUS_LABELS.get(status, status)


def format_rating(rating: Any, max_rating: int = 5) -> str:
    """Puntuación como estrellas llenas y vacías (p. ej. 4 -> '★★★★☆')."""
    try:
        value = int(rating)
    except (TypeError, ValueError):
        return "-"
    value = max(0, min(value, max_rating))
    return "★" * value + "☆" * (max_rating - value)


def format_price(amount: Any, currency: str = "VND") -> str:
    """Importe con separador de miles (punto), p. ej. 15000000 -> '15.000.000 VND'."""
    if amount is None or amount == "":
        return "-"
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return str(amount)
    formatted = f"{value:,.0f}".replace(",", ".")
    return f"{formatted} {currency}".strip()
