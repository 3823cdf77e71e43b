# bodas/web/frontend/shared/common_components.py
import logging
from typing import Callable, List, Union

from reactpy import component, event, html, use_state
from reactpy_router import link

logger = logging.getLogger(__name__)

ADMIN_LINKS = [
    ("/admin/bookings", "Reservas"),
    ("/admin/reviews", "Reseñas"),
    ("/admin/gallery", "Galería"),
    ("/admin/promotions", "Promociones"),
]


def visible_page_numbers(current_page: int, total_pages: int, max_visible_pages: int = 5) -> List[Union[int, str]]:
    """Números de página a mostrar, con "..." donde se omiten páginas."""
    if total_pages <= max_visible_pages:
        return list(range(1, total_pages + 1))

    page_numbers: List[Union[int, str]] = []
    half_visible = max_visible_pages // 2
    start_page = max(1, current_page - half_visible)
    end_page = min(total_pages, start_page + max_visible_pages - 1)

    # Ajustar si estamos cerca del final
    if end_page == total_pages:
        start_page = max(1, total_pages - max_visible_pages + 1)

    if start_page > 1:
        page_numbers.append(1)
        if start_page > 2:
            page_numbers.append("...")

    page_numbers.extend(range(start_page, end_page + 1))

    if end_page < total_pages:
        if end_page < total_pages - 1:
            page_numbers.append("...")
        page_numbers.append(total_pages)
    return page_numbers


@component
def Pagination(
    current_page: int,
    total_pages: int,
    total_items: int,
    items_per_page: int,
    on_page_change: Callable,
    max_visible_pages: int = 5,
):
    """Componente de paginación con resumen y controles."""
    page_numbers = visible_page_numbers(current_page, total_pages, max_visible_pages)

    start_item = ((current_page - 1) * items_per_page) + 1
    end_item = min(current_page * items_per_page, total_items)
    summary = f"Mostrando {start_item}-{end_item} de {total_items} resultados"

    def handle_page_click(page_number):
        if isinstance(page_number, int) and page_number != current_page and 1 <= page_number <= total_pages:
            on_page_change(page_number)

    def page_item(page):
        if not isinstance(page, int):
            return html.li(html.span({"class_name": "pagination-ellipsis"}, "…"))
        return html.li(
            html.a(
                {
                    "href": "#",
                    "on_click": event(lambda e, p=page: handle_page_click(p), prevent_default=True),
                    "aria-current": "page" if page == current_page else None,
                    "aria-label": f"Ir a página {page}",
                    "class_name": "primary" if page == current_page else "secondary outline",
                },
                str(page),
            )
        )

    return html.nav(
        {"class_name": "pagination-container", "aria-label": "Paginación"},
        html.span({"class_name": "pagination-summary"}, summary),
        html.ul(
            {"class_name": "pagination-controls"},
            html.li(
                html.a(
                    {
                        "href": "#",
                        "on_click": event(lambda e: handle_page_click(current_page - 1), prevent_default=True),
                        "aria-disabled": str(current_page == 1).lower(),
                        "aria-label": "Página anterior",
                        "class_name": "secondary" if current_page == 1 else "",
                    },
                    "‹",
                )
            ),
            *[page_item(page) for page in page_numbers],
            html.li(
                html.a(
                    {
                        "href": "#",
                        "on_click": event(lambda e: handle_page_click(current_page + 1), prevent_default=True),
                        "aria-disabled": str(current_page == total_pages).lower(),
                        "aria-label": "Página siguiente",
                        "class_name": "secondary" if current_page == total_pages else "",
                    },
                    "›",
                )
            ),
        ),
    )


@component
def LoadingSpinner(size: str = "medium"):
    """Muestra un spinner de carga."""
    style = {}
    if size == "small":
        style = {"width": "1.5rem", "height": "1.5rem"}
    elif size == "large":
        style = {"width": "3rem", "height": "3rem"}
    # PicoCSS usa aria-busy="true" para mostrar el spinner
    return html.span({"aria-busy": "true", "style": style})


@component
def ConfirmationModal(is_open: bool, title: str, message: str, on_confirm: Callable, on_cancel: Callable):
    """Un modal genérico para solicitar confirmación del usuario."""
    # Los hooks se llaman siempre, aunque el modal esté cerrado
    is_processing, set_is_processing = use_state(False)

    if not is_open:
        return None

    async def handle_confirm(_event):
        if is_processing:
            return
        set_is_processing(True)
        try:
            await on_confirm()
        finally:
            set_is_processing(False)

    return html.dialog(
        {"open": True},
        html.article(
            html.header(
                html.button({"aria-label": "Cerrar", "rel": "prev", "on_click": lambda e: on_cancel()}),
                html.h3(title),
            ),
            html.p(message),
            html.footer(
                html.div(
                    {"class_name": "grid"},
                    html.button(
                        {
                            "class_name": "secondary",
                            "on_click": lambda e: on_cancel(),
                            "disabled": is_processing,
                        },
                        "Cancelar",
                    ),
                    html.button(
                        {
                            "on_click": handle_confirm,
                            "disabled": is_processing,
                            "aria-busy": str(is_processing).lower(),
                        },
                        "Procesando..." if is_processing else "Confirmar",
                    ),
                ),
            ),
        ),
    )


@component
def HeaderNav(brand_name: str = "Wedding Dreams"):
    """Cabecera con la marca y los enlaces de administración."""
    return html.header(
        {"class_name": "sticky-header"},
        html.div(
            {"class_name": "container"},
            html.nav(
                html.ul(html.li(link({"to": "/"}, html.strong(brand_name)))),
                html.ul(*[html.li(link({"to": path}, label)) for path, label in ADMIN_LINKS]),
            ),
        ),
    )


@component
def PageWithLayout(children, brand_name: str = "Wedding Dreams"):
    """Wrapper que incluye el header y la estructura principal en cada página."""
    return html._(
        HeaderNav(brand_name=brand_name),
        html.main({"class_name": "container"}, children),
    )


@component
def FormErrors(errors: List[str]):
    """Lista de errores de validación de un formulario."""
    if not errors:
        return None
    return html.article(
        {"role": "alert", "aria-invalid": "true", "class_name": "form-errors"},
        html.ul(*[html.li({"key": str(i)}, message) for i, message in enumerate(errors)]),
    )
