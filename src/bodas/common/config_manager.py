# bodas/common/config_manager.py
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "si", "sí")


class ConfigManager:
    """
    Gestor de configuración centralizado de Bodas.

    Todos los métodos públicos son @classmethod para centralizar la lectura del
    entorno en un único punto (y poder parchearlo en los tests).
    """

    @classmethod
    def _get_env_with_warning(cls, key: str, default: Any = None, warning_msg: Optional[str] = None) -> Any:
        """
        Obtiene una variable de entorno. Las cadenas vacías cuentan como no definidas.
        Advierte si la variable falta y se esperaba que estuviera.
        """
        value = os.getenv(key, default)
        if value is None or (isinstance(value, str) and not value.strip()):
            if warning_msg:
                logger.warning(f"ADVERTENCIA ConfigManager: {warning_msg}")
            return default
        return value

    @classmethod
    def _get_bool(cls, key: str, default: bool) -> bool:
        value = cls._get_env_with_warning(key, None)
        if value is None:
            return default
        return str(value).strip().lower() in _TRUE_VALUES

    # --- CONFIGURACIONES GENERALES ---

    @classmethod
    def get_log_config(cls) -> Dict[str, Any]:
        """Obtiene la configuración de logging de forma unificada."""
        return {
            "directory": cls._get_env_with_warning("LOG_DIRECTORY", "logs"),
            "level_str": cls._get_env_with_warning("LOG_LEVEL", "INFO"),
            "format": cls._get_env_with_warning(
                "LOG_FORMAT", "%(asctime)s - PID:%(process)d - %(name)s - %(levelname)s - %(funcName)s - %(message)s"
            ),
            "datefmt": cls._get_env_with_warning("LOG_DATEFMT", "%Y-%m-%d %H:%M:%S"),
            "backupCount": int(cls._get_env_with_warning("LOG_BACKUP_COUNT", 7)),
            "app_log_filename_web": cls._get_env_with_warning("APP_LOG_FILENAME_WEB", "bodas_web.log"),
            # Parámetros fijos de rotación
            "when": "midnight",
            "interval": 1,
            "encoding": "utf-8",
        }

    # --- CONFIGURACIONES DEL SERVICIO WEB ---

    @classmethod
    def get_web_config(cls) -> Dict[str, Any]:
        """Configuración del servidor Uvicorn que sirve la interfaz."""
        return {
            "host": cls._get_env_with_warning("BODAS_WEB_HOST", "127.0.0.1"),
            "port": int(cls._get_env_with_warning("BODAS_WEB_PORT", 8080)),
            "debug": cls._get_bool("BODAS_WEB_DEBUG", False),
            "title": cls._get_env_with_warning("BODAS_WEB_TITLE", "Wedding Dreams"),
        }

    @classmethod
    def get_api_client_config(cls) -> Dict[str, Any]:
        """
        Configuración del cliente HTTP del frontend.

        El backend JSON es un servicio externo. Sin BODAS_API_TIMEOUT_SECONDS no se
        fija timeout: una petición colgada deja la consulta en estado de carga.
        """
        timeout = cls._get_env_with_warning("BODAS_API_TIMEOUT_SECONDS")
        return {
            "base_url": cls._get_env_with_warning(
                "BODAS_API_BASE_URL",
                "http://127.0.0.1:3000",
                warning_msg="BODAS_API_BASE_URL no definida, se usa http://127.0.0.1:3000",
            ),
            "timeout": float(timeout) if timeout is not None else None,
        }

    @classmethod
    def get_frontend_config(cls) -> Dict[str, Any]:
        """Parámetros del runtime de datos y de la UI."""
        return {
            "debounce_ms": int(cls._get_env_with_warning("BODAS_DEBOUNCE_MS", 300)),
            "promotions_debounce_ms": int(cls._get_env_with_warning("BODAS_PROMOTIONS_DEBOUNCE_MS", 500)),
            "toast_duration_seconds": float(cls._get_env_with_warning("BODAS_TOAST_DURATION_SECONDS", 5)),
            "page_size": int(cls._get_env_with_warning("BODAS_PAGE_SIZE", 10)),
            "gallery_page_size": int(cls._get_env_with_warning("BODAS_GALLERY_PAGE_SIZE", 12)),
            "realtime_interval_seconds": float(cls._get_env_with_warning("BODAS_REALTIME_INTERVAL_SECONDS", 30)),
            "mock_api": cls._get_bool("BODAS_MOCK_API", False),
        }

    # --- UTILIDADES ---

    @classmethod
    def check_and_display_config(cls, service_name: Optional[str] = None) -> None:
        """Registra la configuración cargada ocultando los valores sensibles."""
        logger.info(" VERIFICACIÓN DE CONFIGURACIÓN ".center(60, "="))
        logger.info(f"Servicio: {service_name or 'No especificado'}")

        for section, getter in (
            ("web", cls.get_web_config),
            ("api_client", cls.get_api_client_config),
            ("frontend", cls.get_frontend_config),
        ):
            for key, value in getter().items():
                if any(sensitive in key.lower() for sensitive in ("pass", "pwd", "secret", "token", "auth")):
                    value = ("*" * 8) if value else "No configurado"
                logger.info(f"  [{section}] {key}: {value}")

        logger.info("=" * 60)
