from unittest.mock import patch

import pytest

# Esta importación es necesaria para que la fixture de configuración funcione.
from bodas.common.config_loader import ConfigLoader


@pytest.fixture(scope="session", autouse=True)
def setup_and_mock_config(pytestconfig):
    """
    Se ejecuta una sola vez por sesión para asegurar que la configuración
    esté 'mockeada' antes de que cualquier prueba se ejecute.
    Esto previene que los tests intenten leer archivos .env.
    """
    ConfigLoader.initialize_service("bodas_test_session")

    # Usamos patch para interceptar las llamadas al ConfigManager.
    # Esto reemplaza la necesidad de un archivo .env durante las pruebas.
    mock_settings = {
        "BODAS_API_BASE_URL": "http://backend.test",
        "BODAS_WEB_TITLE": "Wedding Dreams (test)",
        "BODAS_DEBOUNCE_MS": "300",
        "BODAS_MOCK_API": "false",
        "LOG_DIRECTORY": "logs_test",
    }

    # Creamos un 'side effect' para simular la obtención de valores.
    def mock_get(key, default=None, warning_msg=None):
        return mock_settings.get(key, default)

    patcher = patch("bodas.common.config_manager.ConfigManager._get_env_with_warning", side_effect=mock_get)
    patcher.start()
    yield mock_settings
    patcher.stop()
