# tests/frontend/test_hook_bindings.py
"""
Tests de los bindings de ReactPy renderizando componentes reales con `Layout`,
sin navegador: memorización por valor, reprogramación del debounce, cierre al
desmontar y escrituras seguidas de refresco.
"""

import asyncio
from typing import Any, Dict

import pytest
from reactpy import component, html, use_state
from reactpy.core.layout import Layout

from bodas.web.frontend.api.resources import BOOKINGS
from bodas.web.frontend.hooks.use_promotions_hook import use_promotions_admin
from bodas.web.frontend.hooks.use_resource_hook import use_resource_list
from bodas.web.frontend.hooks.use_settings_hook import use_general_settings
from bodas.web.frontend.state.app_context import AppContext
from bodas.web.frontend.utils.exceptions import APIException

DEBOUNCE_MS = 20


async def settle(layout: Layout, rounds: int = 5) -> None:
    """Procesa los renders pendientes hasta que la cola queda vacía."""
    for _ in range(rounds):
        try:
            await asyncio.wait_for(layout.render(), timeout=0.05)
        except asyncio.TimeoutError:
            return


def provide(child, api_client):
    return AppContext(child, value={"api_client": api_client, "frontend_config": {"debounce_ms": DEBOUNCE_MS}})


@pytest.fixture
def captured() -> Dict[str, Any]:
    return {}


@pytest.fixture
def bookings_view(captured):
    @component
    def BookingsView():
        tick, set_tick = use_state(0)
        filters, set_filters = use_state({"status": "pending", "search": ""})
        # Un dict nuevo en cada render, con los mismos valores
        query = use_resource_list(BOOKINGS, {**filters})
        captured.update(set_tick=set_tick, set_filters=set_filters, query=query)
        return html.p(f"{tick}: {len((query['data'] or {}).get('data') or [])} reservas")

    return BookingsView


class TestUseResourceList:
    @pytest.mark.asyncio
    async def test_unrelated_rerenders_do_not_refetch(self, bookings_view, captured, mock_api_client):
        async with Layout(provide(bookings_view(), mock_api_client)) as layout:
            await layout.render()
            await asyncio.sleep(0.1)
            await settle(layout)

            for tick in (1, 2):
                captured["set_tick"](tick)
                await settle(layout)
            await asyncio.sleep(0.1)

            assert mock_api_client.get.await_count == 1
            assert captured["query"]["data"]["pagination"]["total"] == 3

    @pytest.mark.asyncio
    async def test_filter_changes_are_debounced_into_one_call(self, bookings_view, captured, mock_api_client):
        async with Layout(provide(bookings_view(), mock_api_client)) as layout:
            await layout.render()
            await asyncio.sleep(0.1)
            await settle(layout)

            for term in ("N", "Ng", "Nguy", "Nguyen"):
                captured["set_filters"]({"status": "pending", "search": term})
                await layout.render()
                await asyncio.sleep(0.002)
            await asyncio.sleep(0.1)

            assert mock_api_client.get.await_count == 2
            endpoint, params = mock_api_client.get.await_args.args
            assert endpoint == "/api/bookings"
            assert params["status"] == "pending"
            assert params["search"] == "Nguyen"

    @pytest.mark.asyncio
    async def test_unmount_closes_runner_and_ignores_late_result(
        self, bookings_view, captured, mock_api_client, sample_bookings
    ):
        gate = asyncio.Event()
        envelope = {"success": True, "data": sample_bookings}

        async def slow_get(*args):
            await gate.wait()
            return envelope

        mock_api_client.get.side_effect = slow_get

        @component
        def Host():
            show, set_show = use_state(True)
            captured["set_show"] = set_show
            return bookings_view() if show else html.p("sin reservas")

        async with Layout(provide(Host(), mock_api_client)) as layout:
            await layout.render()
            await asyncio.sleep(0.05)
            await settle(layout)
            assert mock_api_client.get.await_count == 1

            runner = captured["query"]["execute"].__self__
            assert runner.loading is True

            captured["set_show"](False)
            await settle(layout)
            await asyncio.sleep(0.01)
            assert runner.alive is False

            gate.set()
            await asyncio.sleep(0.05)

            assert runner.data is None
            assert runner.loading is True
            assert mock_api_client.get.await_count == 1


class TestWritesFollowedByRefresh:
    @pytest.mark.asyncio
    async def test_create_promotion_returns_result_when_refresh_fails(self, captured, mock_api_client):
        mock_api_client.get.side_effect = APIException("Lista no disponible", 503)

        @component
        def PromotionsView():
            captured["admin"] = use_promotions_admin()
            return html.p("promociones")

        async with Layout(provide(PromotionsView(), mock_api_client)) as layout:
            await layout.render()
            await asyncio.sleep(0.05)
            await settle(layout)

            result = await captured["admin"]["create_promotion"]({"title": "Verano"})
            await settle(layout)

            assert result == {"success": True, "data": {"_id": "new"}}
            mock_api_client.post.assert_awaited_once_with("/api/promotions", {"title": "Verano"})
            assert mock_api_client.get.await_count == 2
            assert captured["admin"]["error"] == "Lista no disponible"

    @pytest.mark.asyncio
    async def test_update_settings_returns_result_when_reload_fails(self, captured, mock_api_client):
        mock_api_client.get.side_effect = APIException("Sin ajustes", 500)
        mock_api_client.put.return_value = {"success": True, "data": {"brandName": "Bodas Lan"}}

        @component
        def SettingsView():
            captured["settings"] = use_general_settings()
            return html.p("ajustes")

        async with Layout(provide(SettingsView(), mock_api_client)) as layout:
            await layout.render()
            await asyncio.sleep(0.05)
            await settle(layout)

            result = await captured["settings"]["update_settings"]({"_id": "s1", "brandName": "Bodas Lan"})

            assert result["brandName"] == "Bodas Lan"
            mock_api_client.put.assert_awaited_once_with("/api/settings/general", {"brandName": "Bodas Lan"})
