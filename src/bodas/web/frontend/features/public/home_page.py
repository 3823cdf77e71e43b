# bodas/web/frontend/features/public/home_page.py
"""
Portada pública: promociones, galería, testimonios, formulario de reserva y
suscripción al boletín. Cada sección tiene su propio hook, así que un fallo en
una (p. ej. la galería) no impide ver las demás.
"""

import logging
from typing import Any, Dict, List

from reactpy import component, event, html, use_state

from ...hooks.use_gallery_hook import use_public_gallery
from ...hooks.use_newsletter_hook import use_newsletter_subscribe
from ...hooks.use_promotions_hook import use_promotions
from ...hooks.use_reviews_hook import use_public_reviews
from ...hooks.use_settings_hook import use_general_settings
from ...shared.async_content import AsyncContent
from ...shared.formatters import format_date, format_rating
from ...shared.styles import BUTTON_PRIMARY, CARDS_CONTAINER, HERO_SECTION, PROMOTION_CARD, REVIEW_CARD
from ...utils.exceptions import APIException, ValidationException
from ..bookings.booking_form import BookingForm
from ..gallery.gallery_page import GalleryGrid

logger = logging.getLogger(__name__)


@component
def HeroSection(settings: Dict[str, Any]):
    return html.section(
        {"class_name": HERO_SECTION},
        html.h1(settings.get("brandName", "")),
        html.p(settings.get("slogan") or settings.get("description") or ""),
        html.a({"href": "#reserva", "role": "button", "class_name": BUTTON_PRIMARY}, "Reserva tu consulta"),
    )


@component
def PromotionsSection():
    promotions_state = use_promotions({"active": True, "limit": 3})
    promotions = promotions_state["data"] or []

    return html.section(
        {"id": "promociones"},
        html.h2("Promociones"),
        AsyncContent(
            loading=promotions_state["loading"],
            error=promotions_state["error"],
            data=promotions,
            empty_message="No hay promociones activas ahora mismo",
            children=html.div(
                {"class_name": CARDS_CONTAINER},
                *[
                    html.article(
                        {"class_name": PROMOTION_CARD, "key": str(p.get("_id") or i)},
                        html.header(html.strong(p.get("title", ""))),
                        html.p(p.get("description", "")),
                        html.small(f"Válida hasta {format_date(p.get('validTo') or p.get('endDate'))}"),
                    )
                    for i, p in enumerate(promotions)
                ],
            ),
        ),
    )


@component
def GallerySection():
    gallery_state = use_public_gallery({"limit": 8})
    items = gallery_state["data"] or []
    return html.section(
        {"id": "galeria"},
        html.h2("Nuestras bodas"),
        AsyncContent(
            loading=gallery_state["loading"],
            error=gallery_state["error"],
            data=items,
            empty_message="Pronto compartiremos nuevas fotos",
            children=GalleryGrid(items=items),
        ),
    )


@component
def TestimonialsSection():
    reviews_state = use_public_reviews(limit=6)
    reviews: List[Dict[str, Any]] = reviews_state["data"] or []
    return html.section(
        {"id": "testimonios"},
        html.h2("Lo que dicen las parejas"),
        AsyncContent(
            loading=reviews_state["loading"],
            error=reviews_state["error"],
            data=reviews,
            empty_message="Todavía no hay testimonios",
            children=html.div(
                {"class_name": CARDS_CONTAINER},
                *[
                    html.article(
                        {"class_name": REVIEW_CARD, "key": str(r.get("_id") or i)},
                        html.p(format_rating(r.get("rating"))),
                        html.blockquote(r.get("content", "")),
                        html.footer(html.strong(r.get("customerName", ""))),
                    )
                    for i, r in enumerate(reviews)
                ],
            ),
        ),
    )


@component
def NewsletterForm():
    email, set_email = use_state("")
    newsletter = use_newsletter_subscribe()

    @event(prevent_default=True)
    async def handle_submit(_event):
        try:
            await newsletter["subscribe"](email)
            set_email("")
        except (APIException, ValidationException) as e:
            logger.info(f"Suscripción rechazada: {e}")

    return html.form(
        {"on_submit": handle_submit, "class_name": "newsletter-form"},
        html.fieldset(
            {"role": "group"},
            html.input(
                {
                    "type": "email",
                    "name": "newsletter-email",
                    "placeholder": "Tu correo electrónico",
                    "value": email,
                    "on_change": lambda e: set_email(e["target"]["value"]),
                }
            ),
            html.button(
                {"type": "submit", "disabled": newsletter["loading"], "aria-busy": str(newsletter["loading"]).lower()},
                "Suscribirme",
            ),
        ),
    )


@component
def Footer(settings: Dict[str, Any]):
    return html.footer(
        {"class_name": "container"},
        html.h3(settings.get("brandName", "")),
        html.p(settings.get("address", "")),
        html.p(f"{settings.get('phone', '')} · {settings.get('email', '')}"),
        html.p(f"Horario: {settings.get('openTime', '')} - {settings.get('closeTime', '')}"),
        html.h4("Recibe nuestras novedades"),
        NewsletterForm(),
    )


@component
def HomePage():
    settings_state = use_general_settings()
    settings = settings_state["settings"]

    return html._(
        html.main(
            {"class_name": "container"},
            HeroSection(settings=settings),
            PromotionsSection(),
            GallerySection(),
            TestimonialsSection(),
            html.section({"id": "reserva"}, BookingForm()),
        ),
        Footer(settings=settings),
    )
