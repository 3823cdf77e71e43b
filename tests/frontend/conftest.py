# tests/frontend/conftest.py
"""
Fixtures compartidas para tests del frontend.

El cliente API se inyecta como mock, igual que lo hace la raíz de la aplicación
a través del contexto.
"""

from typing import Any, Dict, List, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest

from bodas.web.frontend.api.api_client import APIClient


@pytest.fixture
def sample_bookings() -> List[Dict[str, Any]]:
    return [
        {
            "_id": "b1",
            "customerName": "Nguyen Van A",
            "phone": "0901234567",
            "consultationDate": "2024-06-15",
            "consultationTime": "10:00",
            "status": "pending",
        },
        {
            "_id": "b2",
            "customerName": "Nguyen Thi B",
            "phone": "0907654321",
            "consultationDate": "2024-06-16",
            "consultationTime": "14:30",
            "status": "pending",
        },
        {
            "_id": "b3",
            "customerName": "Tran Nguyen C",
            "phone": "0912345678",
            "consultationDate": "2024-06-17",
            "consultationTime": "09:00",
            "status": "pending",
        },
    ]


@pytest.fixture
def mock_api_client(sample_bookings) -> APIClient:
    """Mock de APIClient con los verbos HTTP como AsyncMock."""
    mock = MagicMock(spec=APIClient)
    mock.base_url = "http://backend.test"
    mock.get = AsyncMock(
        return_value={
            "success": True,
            "data": sample_bookings,
            "pagination": {"page": 1, "limit": 10, "total": 3, "pages": 1},
        }
    )
    mock.post = AsyncMock(return_value={"success": True, "data": {"_id": "new"}})
    mock.put = AsyncMock(return_value={"success": True, "data": {}})
    mock.delete = AsyncMock(return_value={"success": True})
    mock.close = AsyncMock()
    return mock


class NotificationRecorder:
    """Sustituto de `show_notification` que guarda (mensaje, estilo)."""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, message: str, style: str = "success"):
        self.calls.append((message, style))

    @property
    def styles(self) -> List[str]:
        return [style for _, style in self.calls]


@pytest.fixture
def notifier() -> NotificationRecorder:
    return NotificationRecorder()
