# bodas/web/frontend/shared/data_table.py
"""
Componente DataTable genérico y reutilizable.

Uso:
    from bodas.web.frontend.shared.data_table import DataTable

    columns = [
        {"key": "customerName", "label": "Cliente"},
        {"key": "status", "label": "Estado", "render": lambda row: StatusBadge(row["status"])},
    ]

    return DataTable(
        data=bookings,
        columns=columns,
        loading=is_loading,
        error=error,
        actions=[{"label": "Confirmar", "on_click": handle_confirm}],
        empty_message="No hay reservas",
    )
"""

import inspect
from typing import Any, Callable, Dict, List, Optional

from reactpy import component, event, html

from .async_content import AsyncContent


def row_key_for(row: Dict[str, Any], index: int) -> str:
    """Key única de una fila: `_id` de MongoDB, `id` o el índice."""
    return str(row.get("_id") or row.get("id") or index)


@component
def DataTable(
    data: List[Dict[str, Any]],
    columns: List[Dict[str, Any]],
    loading: bool = False,
    error: Optional[str] = None,
    actions: Optional[List[Dict[str, Any]]] = None,
    empty_message: str = "No hay datos disponibles",
    row_key: Optional[Callable] = None,
):
    """
    Tabla genérica para listados.

    Args:
        data: Lista de diccionarios con los datos a mostrar
        columns: Definiciones de columna con "key", "label" y "render" opcional
        loading: Si True y aún no hay datos, muestra el spinner
        error: Mensaje de error a mostrar
        actions: Botones por fila ({"label", "on_click", "class_name"?})
        empty_message: Mensaje a mostrar cuando no hay datos
        row_key: Función para generar la key de cada fila
    """
    return AsyncContent(
        loading=loading,
        error=error,
        data=data,
        empty_message=empty_message,
        children=_render_table(data or [], columns, actions, row_key),
    )


def _render_table(
    data: List[Dict[str, Any]],
    columns: List[Dict[str, Any]],
    actions: Optional[List[Dict[str, Any]]],
    row_key: Optional[Callable],
):
    def render_cell(row: Dict[str, Any], column: Dict[str, Any]):
        if callable(column.get("render")):
            return html.td(column["render"](row))
        value = row.get(column.get("key", ""), "")
        return html.td("" if value is None else str(value))

    def render_row(row: Dict[str, Any], index: int):
        cells = [render_cell(row, col) for col in columns]
        if actions:
            cells.append(html.td(_render_actions(row, actions)))
        key = str(row_key(row)) if row_key else row_key_for(row, index)
        return html.tr({"key": key}, cells)

    headers = [html.th({"scope": "col"}, col.get("label", "")) for col in columns]
    if actions:
        headers.append(html.th({"scope": "col"}, "Acciones"))

    return html.div(
        {"class_name": "table-container"},
        html.table(
            html.thead(html.tr(headers)),
            html.tbody([render_row(row, idx) for idx, row in enumerate(data)]),
        ),
    )


def _row_handler(handler: Callable, row: Dict[str, Any]):
    # Las acciones pueden ser async (cambiar estado y refrescar) o un simple setter
    async def handle_click(_event):
        result = handler(row)
        if inspect.isawaitable(result):
            await result

    return handle_click


def _render_actions(row: Dict[str, Any], actions: List[Dict[str, Any]]):
    buttons = []
    for action in actions:
        on_click = action.get("on_click")
        if not on_click:
            continue
        # Una acción puede ocultarse para ciertas filas
        visible = action.get("visible")
        if callable(visible) and not visible(row):
            continue
        buttons.append(
            html.button(
                {
                    "class_name": f"outline {action.get('class_name', 'secondary')}",
                    "on_click": event(_row_handler(on_click, row), prevent_default=True),
                    "type": "button",
                },
                action.get("label", ""),
            )
        )
    return html.div({"style": {"display": "flex", "gap": "0.5rem"}}, *buttons)
