"""
Recorrido completo de la lista de reservas: filtros de la página -> esquema ->
cliente HTTP -> QueryRunner, contra un backend simulado con httpx.MockTransport.
"""

import asyncio

import httpx
import pytest

from bodas.web.frontend.api.api_client import APIClient
from bodas.web.frontend.api.resources import BOOKINGS
from bodas.web.frontend.features.bookings.bookings_page import build_booking_params
from bodas.web.frontend.hooks.query_runner import QueryRunner
from bodas.web.frontend.utils.pagination import should_paginate

ROWS = [
    {"_id": "b1", "customerName": "Nguyen Van A", "status": "pending"},
    {"_id": "b2", "customerName": "Nguyen Thi B", "status": "pending"},
    {"_id": "b3", "customerName": "Tran Nguyen C", "status": "pending"},
]


@pytest.fixture
def backend():
    requests = []

    def handler(request: httpx.Request):
        requests.append(str(request.url))
        return httpx.Response(
            200,
            json={"success": True, "data": ROWS, "pagination": {"page": 1, "limit": 10, "total": 3, "pages": 1}},
        )

    return requests, httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_typing_a_search_results_in_one_request(backend):
    requests, transport = backend
    client = APIClient(base_url="http://backend.test", transport=transport)
    filters = {}

    async def fetch_bookings():
        descriptor = BOOKINGS.build_query(filters)
        return await client.get(descriptor.endpoint, descriptor.as_params())

    runner = QueryRunner(fetch_bookings, debounce_ms=30)

    for term in ["N", "Ng", "Ngu", "Nguy", "Nguye", "Nguyen"]:
        filters = build_booking_params("pending", term, 1, 10)
        runner.watch(BOOKINGS.dependency_values(filters))
        await asyncio.sleep(0.005)

    await asyncio.sleep(0.1)
    await client.close()

    assert requests == ["http://backend.test/api/bookings?status=pending&search=Nguyen&page=1&limit=10"]

    envelope = runner.data
    assert len(envelope["data"]) == 3
    assert envelope["pagination"]["pages"] == 1
    assert should_paginate(envelope["pagination"]) is False
    assert runner.loading is False
    assert runner.error is None


@pytest.mark.asyncio
async def test_backend_error_surfaces_as_state_and_toast():
    toasts = []

    def handler(request):
        return httpx.Response(503, json={"success": False, "error": "Servicio en mantenimiento"})

    client = APIClient(base_url="http://backend.test", transport=httpx.MockTransport(handler))

    async def fetch_bookings():
        descriptor = BOOKINGS.build_query({"page": 1, "limit": 10})
        return await client.get(descriptor.endpoint, descriptor.as_params())

    runner = QueryRunner(fetch_bookings, notify=lambda message, style: toasts.append((message, style)), debounce_ms=5)
    await runner.schedule()
    await client.close()

    assert runner.error == "Servicio en mantenimiento"
    assert runner.data is None
    assert toasts == [("Servicio en mantenimiento", "error")]
