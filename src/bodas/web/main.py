# bodas/web/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI
from reactpy.backend.fastapi import Options, configure
from starlette.staticfiles import StaticFiles

from bodas import __version__

from .dependencies import api_client_provider, get_shared_api_client
from .frontend.api.api_client import APIClient
from .frontend.app import App, head

logger = logging.getLogger(__name__)


# --- Gestor de ciclo de vida (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Iniciando aplicación web...")
    client = api_client_provider.get_api_client()
    logger.info(f"Backend de datos: {client.base_url}")

    yield  # La aplicación se ejecuta aquí

    logger.info("Iniciando cierre ordenado de recursos...")
    try:
        await api_client_provider.get_api_client().close()
        logger.info("Cliente API cerrado.")
    except Exception as e:
        logger.error(f"Error al cerrar el cliente API: {e}", exc_info=True)


def create_app(api_client: Optional[APIClient] = None) -> FastAPI:
    """Crea y configura la aplicación FastAPI que sirve el frontend ReactPy."""
    app = FastAPI(title="Bodas - Interfaz Web", version=__version__, lifespan=lifespan)

    # Inyectar el cliente API (None = el configurado desde el entorno)
    api_client_provider.set_api_client(api_client)

    @app.get("/health")
    async def health(client: APIClient = Depends(get_shared_api_client)):
        return {"status": "ok", "version": __version__, "api_base_url": client.base_url}

    # Montar archivos estáticos
    static_files_path = Path(__file__).parent / "static"
    if static_files_path.exists():
        app.mount("/static", StaticFiles(directory=static_files_path), name="static")

    # Configurar ReactPy
    configure(app, App, options=Options(head=head))

    return app
