# bodas/common/config_loader.py
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class ConfigLoader:
    """
    Cargador de configuración estandarizado para los servicios de Bodas.
    Jerarquía: variables de entorno > .env de servicio > .env general.
    """

    _initialized = False
    _project_root: Optional[Path] = None

    @classmethod
    def initialize_service(cls, service_name: str) -> None:
        """
        Inicializa la configuración para un servicio. Encuentra la raíz del proyecto
        buscando 'pyproject.toml' para no depender del directorio de ejecución.
        """
        if cls._initialized:
            return

        cls._project_root = cls._find_project_root()
        cls._load_environment_variables(service_name)
        cls._initialized = True
        os.environ["BODAS_CONFIG_INITIALIZED"] = "True"

        print(f"CONFIG_LOADER: Servicio '{service_name}' inicializado", file=sys.stderr)
        print(f"CONFIG_LOADER: Proyecto root: {cls._project_root}", file=sys.stderr)

    @staticmethod
    def _find_project_root() -> Path:
        current = Path(__file__).resolve()
        for candidate in (current, *current.parents):
            if (candidate / "pyproject.toml").exists():
                return candidate

        # Instalación no editable: no hay pyproject.toml por encima del paquete
        fallback = Path.cwd()
        print(
            f"ADVERTENCIA CONFIG_LOADER: No se encontró 'pyproject.toml'. Usando el directorio actual: {fallback}",
            file=sys.stderr,
        )
        return fallback

    @classmethod
    def _load_environment_variables(cls, service_name: str) -> None:
        """
        Carga los .env sin `override`, del más específico al más general, para que
        ninguno pise una variable ya definida con mayor precedencia.
        """
        # 1. .env del servicio: src/bodas/{servicio}/.env
        service_env_path = cls._project_root / "src" / "bodas" / service_name / ".env"
        if service_env_path.exists():
            print(f"CONFIG_LOADER: Cargando .env específico desde {service_env_path}", file=sys.stderr)
            load_dotenv(dotenv_path=service_env_path, override=False)

        # 2. .env general del proyecto
        project_env_path = cls._project_root / ".env"
        if project_env_path.exists():
            print(f"CONFIG_LOADER: Cargando .env general desde {project_env_path}", file=sys.stderr)
            load_dotenv(dotenv_path=project_env_path, override=False)

    @classmethod
    def get_project_root(cls) -> Path:
        """Retorna la ruta raíz del proyecto."""
        if not cls._initialized:
            raise RuntimeError("ConfigLoader no ha sido inicializado. Llama a initialize_service() primero.")
        return cls._project_root

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def reset(cls) -> None:
        """Resetea el estado del ConfigLoader (útil para testing)."""
        cls._initialized = False
        cls._project_root = None
        os.environ.pop("BODAS_CONFIG_INITIALIZED", None)
