# tests/frontend/test_app_wiring.py
"""
Tests de las piezas puras que usan la raíz y las páginas: dependencias de la
aplicación, ajustes por defecto y filtros de la página de reservas.
"""

from bodas.web.frontend.api.data_sources import ApiPromotionSource, InMemoryPromotionSource
from bodas.web.frontend.app import build_app_dependencies
from bodas.web.frontend.features.bookings.bookings_page import build_booking_params
from bodas.web.frontend.features.reviews.reviews_page import review_payload
from bodas.web.frontend.hooks.use_settings_hook import merge_settings


class TestBuildAppDependencies:
    def test_real_api_source(self, mock_api_client):
        deps = build_app_dependencies(mock_api_client, {"mock_api": False})

        assert deps["api_client"] is mock_api_client
        assert isinstance(deps["promotion_source"], ApiPromotionSource)
        assert deps["promotion_source"].api_client is mock_api_client

    def test_mock_mode_uses_in_memory_source(self, mock_api_client):
        deps = build_app_dependencies(mock_api_client, {"mock_api": True})
        assert isinstance(deps["promotion_source"], InMemoryPromotionSource)

    def test_frontend_config_from_environment(self, mock_api_client):
        deps = build_app_dependencies(mock_api_client)
        assert deps["frontend_config"]["debounce_ms"] == 300
        assert isinstance(deps["promotion_source"], ApiPromotionSource)


class TestMergeSettings:
    def test_defaults_when_backend_returns_nothing(self):
        settings = merge_settings(None)
        assert settings["brandName"] == "Wedding Dreams"
        assert settings["openTime"] == "09:00"

    def test_backend_values_override_defaults(self):
        settings = merge_settings({"brandName": "Bodas Lan", "phone": None, "extra": 1})
        assert settings["brandName"] == "Bodas Lan"
        # Un null del backend no borra el valor por defecto
        assert settings["phone"] == "0123456789"
        assert settings["extra"] == 1


class TestBuildBookingParams:
    def test_all_and_empty_search_mean_no_filter(self):
        assert build_booking_params("all", "", 1, 10) == {"status": None, "search": None, "page": 1, "limit": 10}

    def test_filters_pass_through(self):
        assert build_booking_params("pending", "Nguyen", 2, 10) == {
            "status": "pending",
            "search": "Nguyen",
            "page": 2,
            "limit": 10,
        }


class TestReviewPayload:
    def test_rating_is_converted_to_int(self):
        payload = review_payload({"customerName": "Lan", "rating": "4"})
        assert payload["rating"] == 4
