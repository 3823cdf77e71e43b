# tests/frontend/test_data_sources.py
"""Tests de las fuentes de promociones."""

import pytest

from bodas.web.frontend.api.data_sources import DEFAULT_MOCK_PROMOTIONS, ApiPromotionSource, InMemoryPromotionSource


class TestApiPromotionSource:
    @pytest.mark.asyncio
    async def test_fetch_translates_filters(self, mock_api_client):
        mock_api_client.get.return_value = {"success": True, "data": [{"_id": "p1"}]}
        source = ApiPromotionSource(mock_api_client)

        result = await source.fetch_promotions({"active": True, "limit": 3})

        assert result == [{"_id": "p1"}]
        mock_api_client.get.assert_awaited_once_with("/api/promotions", {"active": "true", "limit": 3})

    @pytest.mark.asyncio
    async def test_missing_data_gives_empty_list(self, mock_api_client):
        mock_api_client.get.return_value = {"success": True}
        assert await ApiPromotionSource(mock_api_client).fetch_promotions({}) == []


class TestInMemoryPromotionSource:
    @pytest.mark.asyncio
    async def test_defaults(self):
        source = InMemoryPromotionSource(delay_ms=0)
        result = await source.fetch_promotions({})
        assert result == DEFAULT_MOCK_PROMOTIONS
        assert result is not source.promotions

    @pytest.mark.asyncio
    async def test_filters_active_and_limit(self):
        source = InMemoryPromotionSource(
            promotions=[
                {"_id": "1", "isActive": True},
                {"_id": "2", "isActive": False},
                {"_id": "3", "isActive": True},
            ],
            delay_ms=0,
        )

        assert [p["_id"] for p in await source.fetch_promotions({"active": True})] == ["1", "3"]
        assert [p["_id"] for p in await source.fetch_promotions({"active": True, "limit": 1})] == ["1"]
        assert [p["_id"] for p in await source.fetch_promotions({"active": False})] == ["2"]

    @pytest.mark.asyncio
    async def test_active_filter_accepts_query_string_flags(self):
        source = InMemoryPromotionSource(
            promotions=[{"_id": "1", "isActive": True}, {"_id": "2", "isActive": False}, {"_id": "3"}],
            delay_ms=0,
        )

        assert [p["_id"] for p in await source.fetch_promotions({"active": "false"})] == ["2", "3"]
        assert [p["_id"] for p in await source.fetch_promotions({"active": "true"})] == ["1"]

    @pytest.mark.asyncio
    async def test_simulated_latency(self):
        source = InMemoryPromotionSource(promotions=[], delay_ms=1)
        assert await source.fetch_promotions({}) == []
