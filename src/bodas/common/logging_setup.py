# bodas/common/logging_setup.py
import logging
import logging.handlers
import os
from pathlib import Path

from .config_loader import ConfigLoader
from .config_manager import ConfigManager


class RelativePathFormatter(logging.Formatter):
    """
    Formateador que convierte las rutas absolutas de los archivos en rutas
    relativas a la raíz del proyecto, para que los logs sean más legibles.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.project_root = str(ConfigLoader.get_project_root()) if ConfigLoader.is_initialized() else os.getcwd()

    def format(self, record):
        if hasattr(record, "pathname") and record.pathname.startswith(self.project_root):
            record.pathname = os.path.relpath(record.pathname, self.project_root)
        return super().format(record)


def setup_logging(service_name: str) -> Path:
    """
    Configura el logging del servicio: archivo con rotación diaria y consola.
    Retorna la ruta del archivo de log.
    """
    log_config = ConfigManager.get_log_config()
    log_directory = Path(log_config["directory"])
    log_directory.mkdir(parents=True, exist_ok=True)

    log_filename = log_config.get(f"app_log_filename_{service_name}", f"bodas_{service_name}.log")
    log_file_path = log_directory / log_filename

    log_level = getattr(logging, log_config.get("level_str", "INFO").upper(), logging.INFO)
    formatter = RelativePathFormatter(log_config["format"], datefmt=log_config["datefmt"])

    file_handler = logging.handlers.TimedRotatingFileHandler(
        log_file_path,
        when=log_config["when"],
        interval=log_config["interval"],
        backupCount=log_config["backupCount"],
        encoding=log_config["encoding"],
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [file_handler, console_handler]

    # Cada petición exitosa de httpx se registra en INFO; sólo interesan WARNING y ERROR.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.info(f"Logging configurado para el servicio '{service_name}'. Los logs se guardarán en: {log_file_path}")
    return log_file_path
