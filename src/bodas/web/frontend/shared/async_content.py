# bodas/web/frontend/shared/async_content.py
"""
Componentes para manejar estados asíncronos de manera consistente.

Los hooks de consulta devuelven {data, loading, error}; `AsyncContent` decide
qué mostrar a partir de esos tres valores.

Uso:
    from bodas.web.frontend.shared.async_content import AsyncContent

    return AsyncContent(
        loading=bookings_state["loading"],
        error=bookings_state["error"],
        data=bookings_state["bookings"],
        children=BookingsTable(bookings=bookings_state["bookings"]),
    )
"""

from typing import List, Optional

from reactpy import component, html

from .common_components import LoadingSpinner


def resolve_async_state(loading: bool, error: Optional[str], data: Optional[List]) -> str:
    """
    Estado a mostrar: "error", "loading", "empty" o "content".

    Con datos ya cargados se sigue mostrando el contenido durante un refresco, así
    la tabla no parpadea cada vez que cambia un filtro.
    """
    if error:
        return "error"
    if loading and not data:
        return "loading"
    if data is not None and len(data) == 0:
        return "empty"
    return "content"


@component
def AsyncContent(
    loading: bool,
    error: Optional[str] = None,
    data: Optional[List] = None,
    loading_component=None,
    error_component=None,
    empty_component=None,
    empty_message: str = "No hay datos disponibles",
    children=None,
):
    """
    Wrapper para manejar estados de carga de manera consistente.

    Args:
        loading: Si True (y aún no hay datos), muestra el componente de carga
        error: Mensaje de error a mostrar (si existe)
        data: Datos a verificar si están vacíos
        loading_component: Componente personalizado para estado de carga
        error_component: Componente personalizado para estado de error
        empty_component: Componente personalizado para estado vacío
        empty_message: Mensaje a mostrar cuando no hay datos
        children: Contenido a mostrar cuando hay datos y no hay errores
    """
    state = resolve_async_state(loading, error, data)

    if state == "error":
        return error_component or ErrorAlert(message=error)
    if state == "loading":
        return loading_component or LoadingSpinner()
    if state == "empty":
        return empty_component or EmptyState(message=empty_message)
    return children


@component
def ErrorAlert(message: str):
    """Muestra un mensaje de error de manera consistente."""
    if not message:
        return None

    return html.article(
        {
            "aria_invalid": "true",
            "role": "alert",
            "style": {
                "backgroundColor": "var(--pico-color-red-200)",
                "borderColor": "var(--pico-color-red-600)",
                "color": "var(--pico-color-red-900)",
                "padding": "1em",
                "marginBottom": "1em",
                "borderRadius": "var(--pico-border-radius)",
            },
        },
        html.strong("Error: "),
        str(message),
    )


@component
def EmptyState(message: str = "No hay datos disponibles"):
    return html.article(
        {
            "style": {
                "textAlign": "center",
                "padding": "2rem",
                "color": "var(--pico-muted-color)",
            },
        },
        html.p({"style": {"fontSize": "1.1rem", "marginBottom": "0.5rem"}}, "💐"),
        html.p(message),
    )
