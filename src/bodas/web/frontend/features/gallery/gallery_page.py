# bodas/web/frontend/features/gallery/gallery_page.py
import logging
from typing import Any, Callable, Dict, List

from reactpy import component, event, html, use_state

from ...hooks.use_gallery_hook import use_create_gallery, use_delete_gallery, use_galleries
from ...shared.async_content import AsyncContent
from ...shared.common_components import ConfirmationModal, FormErrors, Pagination
from ...shared.styles import BUTTON_PRIMARY, DASHBOARD_CONTROLS, GALLERY_CARD, GALLERY_GRID, GRID, SEARCH_INPUT
from ...state.app_context import use_frontend_config
from ...utils.exceptions import APIException, ValidationException
from ...utils.pagination import should_paginate
from ...utils.validation import validate_gallery_data

logger = logging.getLogger(__name__)

EMPTY_IMAGE: Dict[str, Any] = {"title": "", "description": "", "imageUrl": ""}


@component
def GalleryGrid(items: List[Dict[str, Any]], on_delete: Callable = None):
    """Rejilla de imágenes; sin `on_delete` es de sólo lectura (portada pública)."""
    return html.div(
        {"class_name": GALLERY_GRID},
        *[
            html.article(
                {"class_name": GALLERY_CARD, "key": str(item.get("_id") or index)},
                html.img({"src": item.get("imageUrl", ""), "alt": item.get("title", ""), "loading": "lazy"}),
                html.footer(
                    html.strong(item.get("title", "")),
                    html.p(item.get("description") or ""),
                    html.button(
                        {"class_name": "outline contrast", "on_click": lambda e, it=item: on_delete(it)},
                        "Eliminar",
                    )
                    if on_delete
                    else None,
                ),
            )
            for index, item in enumerate(items)
        ],
    )


@component
def GalleryForm(on_created: Callable):
    form, set_form = use_state(EMPTY_IMAGE)
    errors, set_errors = use_state([])
    create_state = use_create_gallery()

    def field_setter(name):
        return lambda e: set_form(lambda current: {**current, name: e["target"]["value"]})

    @event(prevent_default=True)
    async def handle_submit(_event):
        result = validate_gallery_data(form)
        if not result.is_valid:
            set_errors(result.errors)
            return
        set_errors([])
        try:
            await create_state["create_gallery"](form)
            set_form(EMPTY_IMAGE)
            await on_created()
        except (APIException, ValidationException) as e:
            logger.info(f"Imagen rechazada: {e}")

    return html.form(
        {"on_submit": handle_submit},
        html.h3("Añadir imagen"),
        FormErrors(errors=errors),
        html.div(
            {"class_name": GRID},
            html.input({"placeholder": "Título", "value": form["title"], "on_change": field_setter("title")}),
            html.input({"placeholder": "URL de la imagen", "value": form["imageUrl"], "on_change": field_setter("imageUrl")}),
        ),
        html.textarea({"placeholder": "Descripción", "value": form["description"], "on_change": field_setter("description")}),
        html.button({"type": "submit", "class_name": BUTTON_PRIMARY, "disabled": create_state["loading"]}, "Añadir"),
    )


@component
def GalleryPage():
    page_size = use_frontend_config().get("gallery_page_size", 12)

    search, set_search = use_state("")
    page, set_page = use_state(1)
    item_to_delete, set_item_to_delete = use_state(None)

    gallery_state = use_galleries({"search": search or None, "page": page, "limit": page_size})
    delete_state = use_delete_gallery()
    pagination = gallery_state["pagination"] or {}

    async def handle_confirm_delete():
        if not item_to_delete:
            return
        try:
            await delete_state["delete_gallery"](item_to_delete["_id"])
            await gallery_state["refetch"]()
        except APIException as e:
            logger.debug(f"No se pudo eliminar la imagen {item_to_delete.get('_id')}: {e}")
        finally:
            set_item_to_delete(None)

    return html._(
        html.div(
            {"class_name": DASHBOARD_CONTROLS},
            html.h2("Galería"),
            html.input(
                {
                    "type": "search",
                    "placeholder": "Buscar imágenes...",
                    "value": search,
                    "class_name": SEARCH_INPUT,
                    "on_change": lambda e: (set_search(e["target"]["value"]), set_page(1)),
                }
            ),
        ),
        AsyncContent(
            loading=gallery_state["loading"],
            error=gallery_state["error"],
            data=gallery_state["items"],
            empty_message="La galería está vacía",
            children=GalleryGrid(items=gallery_state["items"], on_delete=set_item_to_delete),
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
        GalleryForm(on_created=gallery_state["refetch"]),
        ConfirmationModal(
            is_open=bool(item_to_delete),
            title="Confirmar eliminación",
            message=f"¿Eliminar la imagen '{item_to_delete.get('title', '') if item_to_delete else ''}'?",
            on_confirm=handle_confirm_delete,
            on_cancel=lambda: set_item_to_delete(None),
        ),
    )
