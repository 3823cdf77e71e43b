# tests/frontend/test_async_content.py
"""
Tests para el contenido asíncrono y la tabla de datos.

Los componentes ReactPy se prueban sólo a nivel de construcción; la lógica de
decisión vive en funciones puras que se prueban directamente.
"""

from bodas.web.frontend.shared.async_content import AsyncContent, EmptyState, ErrorAlert, resolve_async_state
from bodas.web.frontend.shared.data_table import DataTable, row_key_for


class TestResolveAsyncState:
    def test_error_has_priority(self):
        assert resolve_async_state(loading=True, error="Fallo", data=[1]) == "error"

    def test_loading_without_data(self):
        assert resolve_async_state(loading=True, error=None, data=None) == "loading"

    def test_refresh_keeps_content_visible(self):
        assert resolve_async_state(loading=True, error=None, data=[1, 2]) == "content"

    def test_empty(self):
        assert resolve_async_state(loading=False, error=None, data=[]) == "empty"

    def test_content(self):
        assert resolve_async_state(loading=False, error=None, data=[{"_id": "1"}]) == "content"


class TestRowKey:
    def test_prefers_mongo_id(self):
        assert row_key_for({"_id": "a", "id": "b"}, 0) == "a"

    def test_falls_back_to_id_then_index(self):
        assert row_key_for({"id": 7}, 3) == "7"
        assert row_key_for({}, 3) == "3"


class TestComponentsCreate:
    def test_async_content_creates(self):
        assert AsyncContent(loading=False, error=None, data=[], children=None) is not None

    def test_error_alert_creates(self):
        assert ErrorAlert(message="Fallo") is not None

    def test_empty_state_creates(self):
        assert EmptyState(message="No hay reservas") is not None

    def test_data_table_creates(self):
        table = DataTable(data=[{"_id": "1", "name": "A"}], columns=[{"key": "name", "label": "Nombre"}])
        assert table is not None
