# bodas/web/frontend/shared/notifications.py
import asyncio
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional

from reactpy import component, create_context, event, html, use_context, use_effect, use_state

logger = logging.getLogger(__name__)

NotificationContext = create_context(None)

DEFAULT_DURATION_SECONDS = 5.0

STYLE_CONFIG = {
    "success": {"class_name": "toast-success", "icon": "✓", "aria_label": "Mensaje de éxito"},
    "error": {"class_name": "toast-error", "icon": "✕", "aria_label": "Mensaje de error", "aria_invalid": "true"},
    "warning": {"class_name": "toast-warning", "icon": "⚠", "aria_label": "Mensaje de advertencia"},
    "info": {"class_name": "toast-info", "icon": "ℹ", "aria_label": "Mensaje informativo"},
}


class NotificationCenter:
    """
    Cola de mensajes transitorios compartida por toda la aplicación.

    Los productores (hooks de consulta y de envío) sólo añaden; cada mensaje se
    descarta solo tras `duration_seconds` cuando hay un loop asyncio en marcha.
    Los suscriptores reciben la lista completa en cada cambio.
    """

    def __init__(self, duration_seconds: float = DEFAULT_DURATION_SECONDS):
        self.duration_seconds = duration_seconds
        self._notifications: List[Dict[str, Any]] = []
        self._listeners: List[Callable[[List[Dict[str, Any]]], Any]] = []
        self._timers: Dict[str, asyncio.TimerHandle] = {}

    @property
    def notifications(self) -> List[Dict[str, Any]]:
        return list(self._notifications)

    def show_notification(self, message: str, style: str = "success") -> str:
        notification_id = str(uuid.uuid4())
        self._notifications.append({"id": notification_id, "message": message, "style": style})
        self._schedule_dismiss(notification_id)
        self._publish()
        return notification_id

    def dismiss_notification(self, notification_id: str) -> None:
        timer = self._timers.pop(notification_id, None)
        if timer is not None:
            timer.cancel()
        remaining = [n for n in self._notifications if n["id"] != notification_id]
        if len(remaining) != len(self._notifications):
            self._notifications = remaining
            self._publish()

    def clear(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        self._notifications = []
        self._publish()

    def subscribe(self, listener: Callable[[List[Dict[str, Any]]], Any]) -> Callable[[], None]:
        """Registra un oyente; retorna la función para darlo de baja."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _schedule_dismiss(self, notification_id: str) -> None:
        if not self.duration_seconds:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sin loop no hay auto-descarte; queda hasta dismiss_notification()
            return
        self._timers[notification_id] = loop.call_later(
            self.duration_seconds, self.dismiss_notification, notification_id
        )

    def _publish(self) -> None:
        snapshot = self.notifications
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.warning(f"Oyente de notificaciones fallido: {e}")


def use_notifier() -> Optional[Callable[[str, str], Any]]:
    """`show_notification` del contexto, o None si no hay proveedor de notificaciones."""
    notification_ctx = use_context(NotificationContext)
    if not notification_ctx:
        return None
    return notification_ctx["show_notification"]


@component
def Toast(message: str, style: str, on_dismiss: Callable):
    """Una notificación individual, estilizada para Pico.css."""
    # Visible tras el primer render para que la transición CSS de entrada se dispare
    is_visible, set_is_visible = use_state(False)

    @use_effect(dependencies=[])
    def animate_in():
        set_is_visible(True)

    config = STYLE_CONFIG.get(style, STYLE_CONFIG["info"])
    class_name = f"toast {config['class_name']}"
    if is_visible:
        class_name += " show"

    attributes = {"class_name": class_name, "role": "alert", "aria-label": config["aria_label"]}
    if config.get("aria_invalid"):
        attributes["aria-invalid"] = config["aria_invalid"]

    return html.article(
        attributes,
        html.div(
            {"class_name": "toast-content"},
            html.div(
                {"class_name": "toast-message"},
                html.span({"class_name": "toast-icon"}, config["icon"]),
                html.span({"class_name": "toast-text"}, message),
            ),
            html.button(
                {
                    "class_name": "toast-close",
                    "aria-label": "Cerrar notificación",
                    "on_click": event(lambda e: on_dismiss(), prevent_default=True),
                },
                "×",
            ),
        ),
    )


@component
def ToastContainer():
    """Contenedor para todas las notificaciones"""
    notification_ctx = use_context(NotificationContext)
    if not notification_ctx:
        return None

    notifications = notification_ctx["notifications"]
    dismiss_notification = notification_ctx["dismiss_notification"]

    return html.div(
        {"class_name": "toast-container"},
        html.div(
            {"class_name": "toast-stack"},
            [
                Toast(
                    key=n["id"],
                    message=n["message"],
                    style=n["style"],
                    on_dismiss=lambda nid=n["id"]: dismiss_notification(nid),
                )
                for n in notifications
            ],
        ),
    )
