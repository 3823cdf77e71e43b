# bodas/web/frontend/utils/validation.py
import re
from typing import Any, Dict, List, NamedTuple

from pydantic import ValidationError

from ..api.schemas import GalleryPayload, ReviewPayload
from .exceptions import ValidationException

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[0-9]{10,11}$")


# NamedTuple para devolver un resultado de validación claro y estructurado
class ValidationResult(NamedTuple):
    is_valid: bool
    errors: List[str]


def _result(errors: List[str]) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=errors)


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_booking_form(data: Dict[str, Any]) -> ValidationResult:
    """Valida el formulario público de reserva antes de enviarlo."""
    errors: List[str] = []

    if _is_blank(data.get("name")):
        errors.append("Por favor, introduce tu nombre completo.")

    email = data.get("email")
    if _is_blank(email):
        errors.append("Por favor, introduce tu correo electrónico.")
    elif not EMAIL_PATTERN.match(str(email).strip()):
        errors.append("El correo electrónico no es válido.")

    phone = data.get("phone")
    if _is_blank(phone):
        errors.append("Por favor, introduce tu número de teléfono.")
    elif not PHONE_PATTERN.match(re.sub(r"\D", "", str(phone))):
        errors.append("El número de teléfono no es válido.")

    if _is_blank(data.get("date")):
        errors.append("Por favor, elige una fecha.")
    if _is_blank(data.get("time")):
        errors.append("Por favor, elige una hora.")
    if _is_blank(data.get("service")):
        errors.append("Por favor, elige un servicio.")

    return _result(errors)


def validate_newsletter_email(email: Any) -> ValidationResult:
    if _is_blank(email):
        return _result(["Por favor, introduce tu correo electrónico."])
    if not EMAIL_PATTERN.match(str(email).strip()):
        return _result(["El correo electrónico no es válido."])
    return _result([])


def _pydantic_errors(exc: ValidationError) -> List[str]:
    return [f"El campo '{'.'.join(str(p) for p in err['loc'])}' no es válido: {err['msg']}" for err in exc.errors()]


def validate_review_data(data: Dict[str, Any]) -> ValidationResult:
    """Valida una reseña (campos requeridos, longitud y puntuación 1-5)."""
    errors = [f"El campo '{field}' es requerido." for field in ReviewPayload.model_fields if _is_blank(data.get(field))]
    if errors:
        return _result(errors)
    try:
        ReviewPayload.model_validate(data)
    except ValidationError as e:
        return _result(_pydantic_errors(e))
    return _result([])


def validate_gallery_data(data: Dict[str, Any]) -> ValidationResult:
    """Valida una imagen de la galería."""
    errors = [f"El campo '{field}' es requerido." for field in GalleryPayload.model_fields if _is_blank(data.get(field))]
    if errors:
        return _result(errors)
    try:
        GalleryPayload.model_validate(data)
    except ValidationError as e:
        return _result(_pydantic_errors(e))
    return _result([])


def ensure_valid(result: ValidationResult) -> None:
    """Convierte un resultado inválido en `ValidationException` para que el envío lo muestre como toast."""
    if result.is_valid:
        return
    raise ValidationException(" ".join(result.errors), errors=[{"message": e} for e in result.errors])
