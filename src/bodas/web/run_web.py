# bodas/web/run_web.py
"""
Punto de entrada único del servicio Web (Servidor Uvicorn).
"""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path
from typing import Any, Optional

import uvicorn

# --- Añadimos src al path para ejecución directa ---
if __name__ == "__main__":
    src_path = str(Path(__file__).resolve().parent.parent.parent)
    if src_path not in sys.path:
        sys.path.insert(0, src_path)

from bodas.common.config_loader import ConfigLoader
from bodas.common.config_manager import ConfigManager
from bodas.common.logging_setup import setup_logging
from bodas.web.main import create_app

# --- Globales del Servicio ---
_service_name = "web"
_shutdown_initiated = False
_server_instance: Optional[uvicorn.Server] = None


# ---------- Gestión de Cierre Ordenado (Graceful Shutdown) ----------


def _graceful_shutdown(signum: int, frame: Any) -> None:
    """Manejador de señales para un cierre ordenado."""
    global _shutdown_initiated
    if _shutdown_initiated:
        logging.warning("Señal de cierre duplicada recibida. Ya se está deteniendo.")
        return
    _shutdown_initiated = True
    logging.info(f"Señal de parada recibida (Señal: {signum}). Iniciando cierre ordenado...")

    if _server_instance:
        _server_instance.should_exit = True
    else:
        sys.exit(0)


def _setup_signals() -> None:
    """Configura los manejadores de señales para Windows y Unix."""
    signal.signal(signal.SIGINT, _graceful_shutdown)
    if sys.platform == "win32":
        try:
            signal.signal(signal.SIGBREAK, _graceful_shutdown)
        except AttributeError:
            logging.warning("signal.SIGBREAK no está disponible.")
    else:
        signal.signal(signal.SIGTERM, _graceful_shutdown)


# ---------- Lógica del Servicio ----------


def _run_service() -> None:
    """Inicializa y ejecuta el servidor Uvicorn."""
    global _server_instance

    app = create_app()

    web_config = ConfigManager.get_web_config()
    host = web_config["host"]
    port = web_config["port"]
    reload = web_config["debug"]

    logging.info(f"Configuración del servidor: http://{host}:{port} (Reload: {reload})")

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        reload=reload,
        workers=1,  # ReactPy mantiene el estado de cada sesión en memoria
        loop="asyncio",
    )
    _server_instance = uvicorn.Server(config)

    logging.info("Servidor Uvicorn iniciado correctamente.")
    _server_instance.run()


# ---------- Punto de Entrada Principal ----------


def main(service_name: str) -> None:
    """Punto de entrada síncrono llamado por __main__.py."""
    global _service_name
    _service_name = service_name

    # El logging se debe iniciar *antes* que nada
    setup_logging(service_name=_service_name)
    logging.info(f"Iniciando el servicio: {_service_name.capitalize()}...")
    ConfigManager.check_and_display_config(_service_name)

    _setup_signals()

    try:
        _run_service()
    except (KeyboardInterrupt, SystemExit):
        logging.info("Servicio detenido por el usuario o el sistema.")
    except Exception as e:
        logging.critical(f"Error crítico no controlado en main: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logging.info(f"Servicio {_service_name.upper()} ha concluido y liberado recursos.")


def cli() -> None:
    """Entrada del script de consola `bodas-web`."""
    ConfigLoader.initialize_service(_service_name)
    main(_service_name)


if __name__ == "__main__":
    cli()
