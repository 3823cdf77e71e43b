# tests/frontend/test_resource_hooks.py
"""
Tests de las fachadas por recurso.

Las primitivas de ReactPy (`use_resource_list`, `use_resource_mutation`,
`use_api_client`) se sustituyen por dobles que registran la declaración, de modo
que cada fachada se prueba sin renderizar: qué esquema lee, qué ruta escribe y
con qué mensaje y modo de envío.
"""

from typing import Any, Dict, List

import pytest

from bodas.web.frontend.api.resources import APPOINTMENTS, BOOKINGS, CUSTOMERS, REPORTS, REVIEWS, SERVICES
from bodas.web.frontend.hooks import (
    use_bookings_hook,
    use_customers_hook,
    use_gallery_hook,
    use_newsletter_hook,
    use_reviews_hook,
    use_services_hook,
    use_settings_hook,
)
from bodas.web.frontend.utils.exceptions import ValidationException

ENVELOPE = {
    "success": True,
    "data": [{"_id": "1"}],
    "pagination": {"page": 1, "limit": 10, "total": 1, "pages": 1},
}


class HookRecorder:
    """Registra las declaraciones de lista y de envío de una fachada."""

    def __init__(self, list_data: Any = None):
        self.list_data = list_data
        self.lists: List[Dict[str, Any]] = []
        self.mutations: List[Dict[str, Any]] = []

    def use_resource_list(self, schema, params=None, api_client=None, select=None, debounce_ms=None):
        self.lists.append({"schema": schema, "params": params, "select": select})
        data = select(self.list_data) if (select and self.list_data is not None) else self.list_data
        return {"data": data, "loading": False, "error": None, "execute": None, "refetch": None}

    def use_resource_mutation(self, action, success_message=None, error_message=None, exclusive=False):
        self.mutations.append({"success_message": success_message, "exclusive": exclusive})
        return {"run": action, "loading": False, "error": None}


@pytest.fixture
def recorder(monkeypatch):
    rec = HookRecorder(list_data=ENVELOPE)
    for module in (
        use_bookings_hook,
        use_customers_hook,
        use_gallery_hook,
        use_newsletter_hook,
        use_reviews_hook,
        use_services_hook,
        use_settings_hook,
    ):
        if hasattr(module, "use_api_client"):
            monkeypatch.setattr(module, "use_api_client", lambda api_client=None: api_client)
        if hasattr(module, "use_resource_list"):
            monkeypatch.setattr(module, "use_resource_list", rec.use_resource_list)
        if hasattr(module, "use_resource_mutation"):
            monkeypatch.setattr(module, "use_resource_mutation", rec.use_resource_mutation)
    return rec


class TestListFacades:
    def test_use_bookings_exposes_rows_and_pagination(self, recorder):
        result = use_bookings_hook.use_bookings({"status": "pending"})

        assert recorder.lists[0]["schema"] is BOOKINGS
        assert result["bookings"] == [{"_id": "1"}]
        assert result["pagination"]["pages"] == 1

    def test_use_bookings_before_first_response(self, recorder):
        recorder.list_data = None
        result = use_bookings_hook.use_bookings()
        assert result["bookings"] == []
        assert result["pagination"] is None

    def test_use_reviews(self, recorder):
        result = use_reviews_hook.use_reviews({"rating": 5})
        assert recorder.lists[0]["schema"] is REVIEWS
        assert result["reviews"] == [{"_id": "1"}]

    def test_use_services_selects_list(self, recorder):
        result = use_services_hook.use_services({"active": True})
        assert recorder.lists[0]["schema"] is SERVICES
        assert result["data"] == [{"_id": "1"}]

    def test_use_appointments_and_customers(self, recorder):
        appointments = use_customers_hook.use_appointments({"type": "consultation"})
        customers = use_customers_hook.use_customers({"search": "Lan"})

        assert [entry["schema"] for entry in recorder.lists] == [APPOINTMENTS, CUSTOMERS]
        assert appointments["appointments"] == [{"_id": "1"}]
        assert customers["customers"] == [{"_id": "1"}]

    def test_use_reports_passes_period(self, recorder):
        recorder.list_data = {"success": True, "data": {"totalBookings": 12}}
        result = use_settings_hook.use_reports("week")

        assert recorder.lists[0]["schema"] is REPORTS
        assert recorder.lists[0]["params"] == {"period": "week"}
        assert result["data"] == {"totalBookings": 12}


class TestMutationFacades:
    @pytest.mark.asyncio
    async def test_booking_submit_maps_form_and_is_exclusive(self, recorder, mock_api_client):
        hook = use_bookings_hook.use_booking_submit(mock_api_client)
        form = {
            "name": "Nguyen Van A",
            "phone": "0901234567",
            "email": "a@example.com",
            "date": "2024-06-15",
            "time": "10:00",
            "service": "svc-1",
            "message": "",
        }

        result = await hook["submit_booking"](form)

        endpoint, payload = mock_api_client.post.await_args.args
        assert endpoint == "/api/bookings"
        assert payload["customerName"] == "Nguyen Van A"
        assert payload["status"] == "pending"
        assert "service" not in payload and "email" not in payload
        assert result == {"data": {"_id": "new"}}
        assert recorder.mutations[0]["exclusive"] is True
        assert "correo" in recorder.mutations[0]["success_message"]

    @pytest.mark.asyncio
    async def test_update_and_delete_booking_target_item_path(self, recorder, mock_api_client):
        await use_bookings_hook.use_update_booking(mock_api_client)["update_booking"]("b1", {"status": "confirmed"})
        await use_bookings_hook.use_delete_booking(mock_api_client)["delete_booking"]("b1")

        mock_api_client.put.assert_awaited_once_with("/api/bookings/b1", {"status": "confirmed"})
        mock_api_client.delete.assert_awaited_once_with("/api/bookings/b1")

    @pytest.mark.asyncio
    async def test_create_booking(self, recorder, mock_api_client):
        await use_bookings_hook.use_create_booking(mock_api_client)["create_booking"]({"customerName": "Lan"})
        mock_api_client.post.assert_awaited_once_with("/api/bookings", {"customerName": "Lan"})

    @pytest.mark.asyncio
    async def test_contact_submit_drops_unknown_fields(self, recorder, mock_api_client):
        form = {"name": "Lan", "email": "lan@example.com", "subject": "Presupuesto", "message": "Hola", "extra": 1}
        await use_bookings_hook.use_contact_submit(mock_api_client)["submit_contact"](form)

        mock_api_client.post.assert_awaited_once_with(
            "/api/contact", {"name": "Lan", "email": "lan@example.com", "subject": "Presupuesto", "message": "Hola"}
        )

    @pytest.mark.asyncio
    async def test_gallery_writes_use_admin_endpoint(self, recorder, mock_api_client):
        await use_gallery_hook.use_update_gallery(mock_api_client)["update_gallery"]("g1", {"title": "Nuevo"})
        await use_gallery_hook.use_delete_gallery(mock_api_client)["delete_gallery"]("g1")

        mock_api_client.put.assert_awaited_once_with("/api/admin/gallery/g1", {"title": "Nuevo"})
        mock_api_client.delete.assert_awaited_once_with("/api/admin/gallery/g1")

    @pytest.mark.asyncio
    async def test_create_gallery_validates_before_posting(self, recorder, mock_api_client):
        create = use_gallery_hook.use_create_gallery(mock_api_client)["create_gallery"]

        with pytest.raises(ValidationException):
            await create({"title": ""})

        mock_api_client.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_review_update_and_delete(self, recorder, mock_api_client):
        await use_reviews_hook.use_update_review(mock_api_client)["update_review"]("r1", {"rating": 4})
        await use_reviews_hook.use_delete_review(mock_api_client)["delete_review"]("r1")

        mock_api_client.put.assert_awaited_once_with("/api/admin/reviews/r1", {"rating": 4})
        mock_api_client.delete.assert_awaited_once_with("/api/admin/reviews/r1")

    @pytest.mark.asyncio
    async def test_service_crud(self, recorder, mock_api_client):
        await use_services_hook.use_create_service(mock_api_client)["create_service"]({"name": "Fotografía"})
        await use_services_hook.use_update_service(mock_api_client)["update_service"]("s1", {"isActive": False})
        await use_services_hook.use_delete_service(mock_api_client)["delete_service"]("s1")

        mock_api_client.post.assert_awaited_once_with("/api/services", {"name": "Fotografía"})
        mock_api_client.put.assert_awaited_once_with("/api/services/s1", {"isActive": False})
        mock_api_client.delete.assert_awaited_once_with("/api/services/s1")

    @pytest.mark.asyncio
    async def test_newsletter_trims_email(self, recorder, mock_api_client):
        result = await use_newsletter_hook.use_newsletter_subscribe(mock_api_client)["subscribe"](" a@b.vn ")

        mock_api_client.post.assert_awaited_once_with("/api/newsletter", {"email": "a@b.vn"})
        assert result == {"success": True}

    @pytest.mark.asyncio
    async def test_newsletter_rejects_invalid_email(self, recorder, mock_api_client):
        subscribe = use_newsletter_hook.use_newsletter_subscribe(mock_api_client)["subscribe"]
        with pytest.raises(ValidationException):
            await subscribe("no-es-un-email")
        mock_api_client.post.assert_not_awaited()
