# bodas/web/frontend/features/promotions/promotions_page.py
"""
Administración de promociones: filtros, tabla con selección múltiple y borrado
individual o en bloque. Toda la lógica de datos vive en `use_promotions_admin`.
"""

import logging
from typing import Any, Callable, Dict, List

from reactpy import component, html, use_state

from ...hooks.use_promotions_hook import use_promotions_admin
from ...shared.common_components import ConfirmationModal, Pagination
from ...shared.data_table import DataTable
from ...shared.formatters import format_date
from ...shared.styles import DASHBOARD_CONTROLS, GRID, SEARCH_INPUT, TAG
from ...utils.exceptions import APIException
from ...utils.pagination import should_paginate

logger = logging.getLogger(__name__)

STATUS_OPTIONS = [
    ("all", "Estado: Todos"),
    ("active", "Activa"),
    ("inactive", "Inactiva"),
    ("expired", "Caducada"),
    ("upcoming", "Próxima"),
]
TYPE_OPTIONS = [("all", "Tipo: Todos"), ("popup", "Popup"), ("banner", "Banner"), ("slide", "Slide")]
TARGET_PAGE_OPTIONS = [
    ("all", "Página: Todas"),
    ("landing", "Landing"),
    ("booking", "Reservas"),
    ("homepage", "Portada"),
]


def toggle_selection(selected: List[str], promotion_id: str) -> List[str]:
    if promotion_id in selected:
        return [item for item in selected if item != promotion_id]
    return [*selected, promotion_id]


def _select(name: str, value: str, options, on_change: Callable):
    return html.select(
        {"name": name, "value": value, "on_change": lambda e: on_change(e["target"]["value"])},
        *[html.option({"value": option_value, "key": option_value}, label) for option_value, label in options],
    )


@component
def PromotionsFilters(filters: Dict[str, Any], on_change: Callable, selected_count: int, on_delete_selected: Callable):
    def update(name):
        # Cualquier cambio de filtro vuelve a la primera página
        return lambda value: on_change({**filters, name: value, "page": 1})

    return html.div(
        {"class_name": DASHBOARD_CONTROLS},
        html.h2("Promociones"),
        html.div(
            {"class_name": GRID},
            html.input(
                {
                    "type": "search",
                    "placeholder": "Buscar promociones...",
                    "value": filters.get("search") or "",
                    "class_name": SEARCH_INPUT,
                    "on_change": lambda e: update("search")(e["target"]["value"]),
                }
            ),
            _select("filter-status", filters.get("status", "all"), STATUS_OPTIONS, update("status")),
            _select("filter-type", filters.get("type", "all"), TYPE_OPTIONS, update("type")),
            _select("filter-target", filters.get("target_page", "all"), TARGET_PAGE_OPTIONS, update("target_page")),
        ),
        html.button(
            {"class_name": "contrast", "on_click": lambda e: on_delete_selected()},
            f"Eliminar seleccionadas ({selected_count})",
        )
        if selected_count
        else None,
    )


@component
def PromotionsPage():
    admin = use_promotions_admin()
    selected, set_selected = use_state([])
    promotion_to_delete, set_promotion_to_delete = use_state(None)
    confirm_bulk, set_confirm_bulk = use_state(False)

    pagination = admin["pagination"] or {}

    async def handle_toggle_active(promotion):
        try:
            await admin["update_promotion"](promotion["_id"], {"isActive": not promotion.get("isActive")})
        except APIException as e:
            logger.debug(f"No se pudo actualizar la promoción {promotion.get('_id')}: {e}")

    async def handle_confirm_delete():
        try:
            if confirm_bulk:
                await admin["delete_multiple_promotions"](selected)
                set_selected([])
            elif promotion_to_delete:
                await admin["delete_promotion"](promotion_to_delete["_id"])
        except APIException as e:
            logger.debug(f"No se pudieron eliminar las promociones: {e}")
        finally:
            set_promotion_to_delete(None)
            set_confirm_bulk(False)

    def close_modal():
        set_promotion_to_delete(None)
        set_confirm_bulk(False)

    columns = [
        {
            "key": "select",
            "label": "",
            "render": lambda row: html.input(
                {
                    "type": "checkbox",
                    "checked": row.get("_id") in selected,
                    "on_change": lambda e, pid=row.get("_id"): set_selected(lambda cur: toggle_selection(cur, pid)),
                }
            ),
        },
        {"key": "title", "label": "Título"},
        {"key": "type", "label": "Tipo", "render": lambda row: html.span({"class_name": TAG}, row.get("type") or "-")},
        {"key": "targetPage", "label": "Página"},
        {
            "key": "period",
            "label": "Vigencia",
            "render": lambda row: f"{format_date(row.get('startDate'))} - {format_date(row.get('endDate'))}",
        },
        {"key": "isActive", "label": "Activa", "render": lambda row: "Sí" if row.get("isActive") else "No"},
    ]
    actions = [
        {"label": "Activar/Desactivar", "class_name": "secondary", "on_click": handle_toggle_active},
        {"label": "Eliminar", "class_name": "contrast", "on_click": set_promotion_to_delete},
    ]

    if confirm_bulk:
        modal_message = f"¿Eliminar {len(selected)} promociones seleccionadas?"
    else:
        modal_message = f"¿Eliminar la promoción '{promotion_to_delete.get('title', '') if promotion_to_delete else ''}'?"

    return html._(
        PromotionsFilters(
            filters=admin["filters"],
            on_change=admin["set_filters"],
            selected_count=len(selected),
            on_delete_selected=lambda: set_confirm_bulk(True),
        ),
        DataTable(
            data=admin["promotions"],
            columns=columns,
            loading=admin["loading"],
            error=admin["error"],
            actions=actions,
            empty_message="No hay promociones que coincidan con los filtros",
        ),
        Pagination(
            current_page=pagination.get("page", 1),
            total_pages=pagination.get("pages", 0),
            total_items=pagination.get("total", 0),
            items_per_page=pagination.get("limit", 10),
            on_page_change=admin["set_page"],
        )
        if should_paginate(pagination)
        else None,
        ConfirmationModal(
            is_open=confirm_bulk or bool(promotion_to_delete),
            title="Confirmar eliminación",
            message=modal_message,
            on_confirm=handle_confirm_delete,
            on_cancel=close_modal,
        ),
    )
