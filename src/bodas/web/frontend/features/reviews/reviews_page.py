# bodas/web/frontend/features/reviews/reviews_page.py
import logging
from typing import Any, Callable, Dict

from reactpy import component, event, html, use_state

from ...hooks.use_reviews_hook import use_create_review, use_delete_review, use_reviews
from ...shared.common_components import ConfirmationModal, FormErrors, Pagination
from ...shared.data_table import DataTable
from ...shared.formatters import format_date, format_rating
from ...shared.styles import BUTTON_PRIMARY, DASHBOARD_CONTROLS, GRID, SEARCH_INPUT
from ...state.app_context import use_frontend_config
from ...utils.exceptions import APIException, ValidationException
from ...utils.pagination import should_paginate
from ...utils.validation import validate_review_data

logger = logging.getLogger(__name__)

EMPTY_REVIEW: Dict[str, Any] = {
    "customerName": "",
    "avatarUrl": "",
    "content": "",
    "rating": "5",
    "eventDate": "",
}


def review_payload(form: Dict[str, Any]) -> Dict[str, Any]:
    """Los selects devuelven texto; el backend espera `rating` entero."""
    payload = dict(form)
    try:
        payload["rating"] = int(form.get("rating") or 0)
    except (TypeError, ValueError):
        payload["rating"] = 0
    return payload


@component
def ReviewForm(on_created: Callable):
    form, set_form = use_state(EMPTY_REVIEW)
    errors, set_errors = use_state([])
    create_state = use_create_review()

    def field_setter(name):
        return lambda e: set_form(lambda current: {**current, name: e["target"]["value"]})

    @event(prevent_default=True)
    async def handle_submit(_event):
        payload = review_payload(form)
        result = validate_review_data(payload)
        if not result.is_valid:
            set_errors(result.errors)
            return
        set_errors([])
        try:
            await create_state["create_review"](payload)
            set_form(EMPTY_REVIEW)
            await on_created()
        except (APIException, ValidationException) as e:
            logger.info(f"Reseña rechazada: {e}")

    return html.form(
        {"on_submit": handle_submit},
        html.h3("Nueva reseña"),
        FormErrors(errors=errors),
        html.div(
            {"class_name": GRID},
            html.input({"placeholder": "Nombre de la pareja", "value": form["customerName"], "on_change": field_setter("customerName")}),
            html.input({"placeholder": "URL del avatar", "value": form["avatarUrl"], "on_change": field_setter("avatarUrl")}),
            html.input({"type": "date", "value": form["eventDate"], "on_change": field_setter("eventDate")}),
            html.select(
                {"value": form["rating"], "on_change": field_setter("rating")},
                *[html.option({"value": str(n), "key": str(n)}, format_rating(n)) for n in range(5, 0, -1)],
            ),
        ),
        html.textarea({"placeholder": "Opinión", "value": form["content"], "on_change": field_setter("content")}),
        html.button(
            {"type": "submit", "class_name": BUTTON_PRIMARY, "disabled": create_state["loading"]},
            "Guardar reseña",
        ),
    )


@component
def ReviewsPage():
    page_size = use_frontend_config().get("page_size", 10)

    search, set_search = use_state("")
    rating_filter, set_rating_filter = use_state("")
    page, set_page = use_state(1)
    review_to_delete, set_review_to_delete = use_state(None)

    reviews_state = use_reviews(
        {"search": search or None, "rating": rating_filter or None, "page": page, "limit": page_size}
    )
    delete_state = use_delete_review()
    pagination = reviews_state["pagination"] or {}

    async def handle_confirm_delete():
        if not review_to_delete:
            return
        try:
            await delete_state["delete_review"](review_to_delete["_id"])
            await reviews_state["refetch"]()
        except APIException as e:
            logger.debug(f"No se pudo eliminar la reseña {review_to_delete.get('_id')}: {e}")
        finally:
            set_review_to_delete(None)

    columns = [
        {"key": "customerName", "label": "Pareja"},
        {"key": "rating", "label": "Puntuación", "render": lambda row: format_rating(row.get("rating"))},
        {"key": "content", "label": "Opinión"},
        {"key": "eventDate", "label": "Boda", "render": lambda row: format_date(row.get("eventDate"))},
    ]

    return html._(
        html.div(
            {"class_name": DASHBOARD_CONTROLS},
            html.h2("Reseñas"),
            html.div(
                {"class_name": GRID},
                html.input(
                    {
                        "type": "search",
                        "placeholder": "Buscar reseñas...",
                        "value": search,
                        "class_name": SEARCH_INPUT,
                        "on_change": lambda e: (set_search(e["target"]["value"]), set_page(1)),
                    }
                ),
                html.select(
                    {"value": rating_filter, "on_change": lambda e: (set_rating_filter(e["target"]["value"]), set_page(1))},
                    html.option({"value": ""}, "Puntuación: Todas"),
                    *[html.option({"value": str(n), "key": str(n)}, format_rating(n)) for n in range(5, 0, -1)],
                ),
            ),
        ),
        DataTable(
            data=reviews_state["reviews"],
            columns=columns,
            loading=reviews_state["loading"],
            error=reviews_state["error"],
            actions=[{"label": "Eliminar", "class_name": "contrast", "on_click": set_review_to_delete}],
            empty_message="Aún no hay reseñas",
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
        ReviewForm(on_created=reviews_state["refetch"]),
        ConfirmationModal(
            is_open=bool(review_to_delete),
            title="Confirmar eliminación",
            message="¿Eliminar esta reseña?",
            on_confirm=handle_confirm_delete,
            on_cancel=lambda: set_review_to_delete(None),
        ),
    )
