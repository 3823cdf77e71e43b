# bodas/web/frontend/utils/exceptions.py
from typing import Any, Dict, List, Optional

DEFAULT_ERROR_MESSAGE = "Ocurrió un error inesperado"
CONNECTION_ERROR_MESSAGE = "No se pudo conectar con el servidor"


class APIException(Exception):
    """Error de una llamada a la API (estado HTTP no-2xx o sobre con success=false)."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.status_code:
            return f"[API Error {self.status_code}]: {self.message}"
        return f"[API Error]: {self.message}"


class APIConnectionException(APIException):
    """Fallo de transporte: DNS, conexión rechazada, socket cerrado."""

    def __init__(self, message: str = CONNECTION_ERROR_MESSAGE):
        super().__init__(message)


class ValidationException(Exception):
    """Excepción para errores de validación de datos antes de enviarlos a la API."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)

    def __str__(self):
        return f"[Validation Error]: {self.message} - {self.errors}"


class MutationInProgressException(Exception):
    """Se intentó un envío mientras otro del mismo runner exclusivo seguía pendiente."""

    def __init__(self, message: str = "Ya hay un envío en curso"):
        self.message = message
        super().__init__(self.message)


def error_message(exc: BaseException, fallback: Optional[str] = None) -> str:
    """
    Mensaje legible para mostrar al usuario.

    Los errores tipados (API y validación) aportan su propio mensaje; para el resto
    se usa `fallback` o el mensaje genérico.
    """
    if isinstance(exc, (APIException, ValidationException)) and exc.message:
        return exc.message
    return fallback or DEFAULT_ERROR_MESSAGE
