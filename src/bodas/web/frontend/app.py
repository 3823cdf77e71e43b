# bodas/web/frontend/app.py
import logging
from typing import Any, Dict, Optional

from reactpy import component, html, use_effect, use_ref, use_state
from reactpy_router import browser_router, route

from bodas.common.config_manager import ConfigManager
from bodas.web.dependencies import get_shared_api_client

from .api.api_client import APIClient
from .api.data_sources import ApiPromotionSource, InMemoryPromotionSource

# Páginas
from .features.bookings.bookings_page import BookingsPage
from .features.gallery.gallery_page import GalleryPage
from .features.promotions.promotions_page import PromotionsPage
from .features.public.home_page import HomePage
from .features.reviews.reviews_page import ReviewsPage

# Hooks
from .hooks.use_settings_hook import use_general_settings

# Componentes compartidos
from .shared.common_components import PageWithLayout
from .shared.notifications import NotificationCenter, NotificationContext, ToastContainer

# Contexto de la aplicación
from .state.app_context import AppContext

logger = logging.getLogger(__name__)


def build_app_dependencies(api_client: APIClient, frontend_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Dependencias compartidas que la raíz publica en `AppContext`.

    La fuente de promociones se decide aquí, una sola vez: datos de demostración
    si `mock_api` está activo, la API real en caso contrario.
    """
    frontend_config = frontend_config if frontend_config is not None else ConfigManager.get_frontend_config()
    if frontend_config.get("mock_api"):
        logger.info("Modo demostración: las promociones se sirven desde memoria")
        promotion_source = InMemoryPromotionSource()
    else:
        promotion_source = ApiPromotionSource(api_client)
    return {
        "api_client": api_client,
        "promotion_source": promotion_source,
        "frontend_config": frontend_config,
    }


# --- Componentes de Página (Lógica de cada ruta) ---
@component
def AdminPage(page):
    settings_state = use_general_settings()
    return PageWithLayout(children=page, brand_name=settings_state["settings"]["brandName"])


@component
def NotFoundPage():
    return PageWithLayout(
        children=html.article(
            html.header(html.h1("Página no encontrada")),
            html.p("La página que buscas no existe."),
        )
    )


# --- Estructura Principal de la App ---
@component
def App():
    """
    Componente raíz: crea una sola vez las dependencias compartidas (cliente API,
    fuente de promociones, centro de notificaciones) y las provee por contexto
    junto con el enrutador.
    """
    dependencies_ref = use_ref(None)
    center_ref = use_ref(None)
    if dependencies_ref.current is None:
        dependencies_ref.current = build_app_dependencies(get_shared_api_client())
    if center_ref.current is None:
        duration = dependencies_ref.current["frontend_config"].get("toast_duration_seconds", 5)
        center_ref.current = NotificationCenter(duration_seconds=duration)
    center: NotificationCenter = center_ref.current

    notifications, set_notifications = use_state(center.notifications)

    @use_effect(dependencies=[])
    def subscribe_notifications():
        return center.subscribe(set_notifications)

    notification_context_value = {
        "notifications": notifications,
        "show_notification": center.show_notification,
        "dismiss_notification": center.dismiss_notification,
    }

    return AppContext(
        NotificationContext(
            html._(
                browser_router(
                    route("/", HomePage()),
                    route("/admin/bookings", AdminPage(BookingsPage())),
                    route("/admin/reviews", AdminPage(ReviewsPage())),
                    route("/admin/gallery", AdminPage(GalleryPage())),
                    route("/admin/promotions", AdminPage(PromotionsPage())),
                    route("*", NotFoundPage()),
                ),
                ToastContainer(),
            ),
            value=notification_context_value,
        ),
        value=dependencies_ref.current,
    )


# --- Elementos del <head> ---
head = html.head(
    html.title(ConfigManager.get_web_config()["title"]),
    html.meta({"charset": "utf-8"}),
    html.meta({"name": "viewport", "content": "width=device-width, initial-scale=1"}),
    html.link({"rel": "stylesheet", "href": "https://cdn.jsdelivr.net/npm/@picocss/pico@2.1.1/css/pico.pink.min.css"}),
    html.link({"rel": "stylesheet", "href": "/static/custom.css"}),
)
