# bodas/web/frontend/utils/mappers.py
"""Traducciones entre las formas de los formularios y los esquemas del backend."""

from typing import Any, Dict, Mapping

from ..api.schemas import BookingForm, BookingPayload


def map_booking_form(form: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convierte el formulario público de reserva al esquema de /api/bookings.

    `service` y `email` no tienen campo en el esquema de reservas y se descartan;
    un mensaje vacío no se envía como `requirements`.
    """
    data = BookingForm.model_validate(dict(form))
    payload = BookingPayload(
        customerName=data.name,
        phone=data.phone,
        consultationDate=data.date,
        consultationTime=data.time,
        requirements=data.message or None,
        status="pending",
    )
    return payload.model_dump(exclude_none=True)
