# bodas/web/frontend/features/bookings/bookings_page.py
"""
Página de administración de reservas.

Filtros de estado y búsqueda, tabla, paginación y cambio de estado. Los filtros
se pasan tal cual a `use_bookings`: el debounce lo aplica el propio hook, así que
una ráfaga de pulsaciones termina en una sola petición.
"""

import logging
from typing import Callable, Dict, Optional

from reactpy import component, html, use_state

from ...api.schemas import BOOKING_STATUSES
from ...hooks.use_bookings_hook import (
    use_bookings,
    use_delete_booking,
    use_pending_bookings_count,
    use_update_booking,
)
from ...shared.common_components import ConfirmationModal, Pagination
from ...shared.data_table import DataTable
from ...shared.formatters import (
    BOOKING_STATUS_CLASSES,
    format_booking_status,
    format_date,
    format_time,
)
from ...shared.styles import DASHBOARD_CONTROLS, GRID, SEARCH_INPUT, TAG
from ...state.app_context import use_frontend_config
from ...utils.exceptions import APIException
from ...utils.pagination import should_paginate

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


def build_booking_params(status_filter: str, search: str, page: int, limit: int) -> Dict:
    """Filtros lógicos de la página -> parámetros de `use_bookings` ("all" = sin filtro)."""
    return {
        "status": None if status_filter == "all" else status_filter,
        "search": search or None,
        "page": page,
        "limit": limit,
    }


@component
def BookingsControls(
    status_filter: str, on_status: Callable, search: str, on_search: Callable, realtime_interval: float = 30
):
    return html.div(
        {"class_name": DASHBOARD_CONTROLS},
        html.h2("Reservas de consulta ", PendingBookingsBadge(interval_seconds=realtime_interval)),
        html.div(
            {"class_name": GRID},
            html.input(
                {
                    "type": "search",
                    "name": "search-booking",
                    "placeholder": "Buscar por nombre o teléfono...",
                    "value": search,
                    "on_change": lambda event: on_search(event["target"]["value"]),
                    "class_name": SEARCH_INPUT,
                }
            ),
            html.select(
                {
                    "name": "filter-status",
                    "value": status_filter,
                    "on_change": lambda e: on_status(e["target"]["value"]),
                },
                html.option({"value": "all"}, "Estado: Todos"),
                *[html.option({"value": s, "key": s}, format_booking_status(s)) for s in BOOKING_STATUSES],
            ),
        ),
    )


@component
def PendingBookingsBadge(interval_seconds: float):
    pending_state = use_pending_bookings_count(interval_seconds)
    total = pending_state["data"]
    if not total:
        return None
    return html.span({"class_name": f"{TAG} tag-pending", "title": "Reservas pendientes"}, f"{total} pendientes")


@component
def StatusBadge(status: Optional[str]):
    return html.span({"class_name": BOOKING_STATUS_CLASSES.get(status, "tag")}, format_booking_status(status))


@component
def BookingsPage():
    frontend_config = use_frontend_config()
    page_size = frontend_config.get("page_size", DEFAULT_PAGE_SIZE)

    status_filter, set_status_filter = use_state("all")
    search, set_search = use_state("")
    page, set_page = use_state(1)
    booking_to_delete, set_booking_to_delete = use_state(None)

    bookings_state = use_bookings(build_booking_params(status_filter, search, page, page_size))
    update_state = use_update_booking()
    delete_state = use_delete_booking()

    pagination = bookings_state["pagination"] or {}

    def handle_status_filter(value):
        set_status_filter(value)
        set_page(1)

    def handle_search(value):
        set_search(value)
        set_page(1)

    async def change_status(booking, new_status):
        try:
            await update_state["update_booking"](booking["_id"], {"status": new_status})
            await bookings_state["refetch"]()
        except APIException as e:
            # El toast de error ya se mostró
            logger.debug(f"No se pudo cambiar el estado de la reserva {booking.get('_id')}: {e}")

    async def handle_confirm_delete():
        if not booking_to_delete:
            return
        try:
            await delete_state["delete_booking"](booking_to_delete["_id"])
            await bookings_state["refetch"]()
        except APIException as e:
            logger.debug(f"No se pudo eliminar la reserva {booking_to_delete.get('_id')}: {e}")
        finally:
            set_booking_to_delete(None)

    columns = [
        {"key": "customerName", "label": "Cliente"},
        {"key": "phone", "label": "Teléfono"},
        {"key": "consultationDate", "label": "Fecha", "render": lambda row: format_date(row.get("consultationDate"))},
        {"key": "consultationTime", "label": "Hora", "render": lambda row: format_time(row.get("consultationTime"))},
        {"key": "status", "label": "Estado", "render": lambda row: StatusBadge(row.get("status"))},
        {"key": "requirements", "label": "Requisitos"},
    ]
    actions = [
        {
            "label": "Confirmar",
            "on_click": lambda row: change_status(row, "confirmed"),
            "visible": lambda row: row.get("status") == "pending",
        },
        {
            "label": "Consultada",
            "on_click": lambda row: change_status(row, "consulted"),
            "visible": lambda row: row.get("status") == "confirmed",
        },
        {
            "label": "Cancelar",
            "on_click": lambda row: change_status(row, "cancelled"),
            "visible": lambda row: row.get("status") in ("pending", "confirmed"),
        },
        {"label": "Eliminar", "class_name": "contrast", "on_click": set_booking_to_delete},
    ]

    return html._(
        BookingsControls(
            status_filter=status_filter,
            on_status=handle_status_filter,
            search=search,
            on_search=handle_search,
            realtime_interval=frontend_config.get("realtime_interval_seconds", 30),
        ),
        DataTable(
            data=bookings_state["bookings"],
            columns=columns,
            loading=bookings_state["loading"],
            error=bookings_state["error"],
            actions=actions,
            empty_message="No hay reservas que coincidan con los filtros",
        ),
        Pagination(
            current_page=pagination.get("page", page),
            total_pages=pagination.get("pages", 0),
            total_items=pagination.get("total", 0),
            items_per_page=pagination.get("limit", page_size),
            on_page_change=set_page,
        )
        if should_paginate(pagination)
        else None,
        ConfirmationModal(
            is_open=bool(booking_to_delete),
            title="Confirmar eliminación",
            message=f"¿Eliminar la reserva de '{booking_to_delete.get('customerName', '') if booking_to_delete else ''}'?",
            on_confirm=handle_confirm_delete,
            on_cancel=lambda: set_booking_to_delete(None),
        ),
    )
