# bodas/web/frontend/features/bookings/booking_form.py
"""Formulario público de reserva de consulta."""

import logging
from typing import Any, Dict

from reactpy import component, event, html, use_state

from ...hooks.use_bookings_hook import use_booking_submit
from ...hooks.use_services_hook import use_services
from ...shared.common_components import FormErrors
from ...shared.styles import BUTTON_PRIMARY, GRID
from ...utils.exceptions import APIException, MutationInProgressException
from ...utils.validation import validate_booking_form

logger = logging.getLogger(__name__)

EMPTY_FORM: Dict[str, Any] = {
    "name": "",
    "phone": "",
    "email": "",
    "date": "",
    "time": "",
    "service": "",
    "message": "",
}

TIME_SLOTS = ["09:00", "10:00", "11:00", "14:00", "15:00", "16:00", "17:00"]


@component
def BookingForm():
    form, set_form = use_state(EMPTY_FORM)
    errors, set_errors = use_state([])
    submit_state = use_booking_submit()
    services_state = use_services({"active": True})
    services = services_state["data"] or []

    def field_setter(name):
        return lambda e: set_form(lambda current: {**current, name: e["target"]["value"]})

    @event(prevent_default=True)
    async def handle_submit(_event):
        result = validate_booking_form(form)
        if not result.is_valid:
            set_errors(result.errors)
            return
        set_errors([])
        try:
            await submit_state["submit_booking"](form)
        except MutationInProgressException:
            return
        except APIException as e:
            # El toast de error ya se mostró; se conservan los datos del formulario
            logger.info(f"Reserva rechazada: {e}")
            return
        set_form(EMPTY_FORM)

    return html.form(
        {"on_submit": handle_submit, "class_name": "booking-form"},
        html.h2("Reserva tu consulta"),
        FormErrors(errors=errors),
        html.div(
            {"class_name": GRID},
            html.input({"name": "name", "placeholder": "Nombre completo", "value": form["name"], "on_change": field_setter("name")}),
            html.input({"name": "phone", "type": "tel", "placeholder": "Teléfono", "value": form["phone"], "on_change": field_setter("phone")}),
            html.input({"name": "email", "type": "email", "placeholder": "Correo electrónico", "value": form["email"], "on_change": field_setter("email")}),
        ),
        html.div(
            {"class_name": GRID},
            html.input({"name": "date", "type": "date", "value": form["date"], "on_change": field_setter("date")}),
            html.select(
                {"name": "time", "value": form["time"], "on_change": field_setter("time")},
                html.option({"value": ""}, "Elige una hora"),
                *[html.option({"value": slot, "key": slot}, slot) for slot in TIME_SLOTS],
            ),
            html.select(
                {"name": "service", "value": form["service"], "on_change": field_setter("service")},
                html.option({"value": ""}, "Elige un servicio"),
                *[
                    html.option({"value": s.get("name", ""), "key": str(s.get("_id") or s.get("name"))}, s.get("name", ""))
                    for s in services
                ],
            ),
        ),
        html.textarea(
            {
                "name": "message",
                "placeholder": "Cuéntanos qué tienes en mente",
                "value": form["message"],
                "on_change": field_setter("message"),
            }
        ),
        html.button(
            {
                "type": "submit",
                "class_name": BUTTON_PRIMARY,
                "disabled": submit_state["loading"],
                "aria-busy": str(submit_state["loading"]).lower(),
            },
            "Enviando..." if submit_state["loading"] else "Reservar consulta",
        ),
    )
