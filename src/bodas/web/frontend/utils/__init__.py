# bodas/web/frontend/utils/__init__.py
"""Utilidades compartidas para el frontend."""

from .exceptions import (
    APIConnectionException,
    APIException,
    MutationInProgressException,
    ValidationException,
    error_message,
)
from .mappers import map_booking_form
from .pagination import clamp_page, compute_total_pages, paginate, should_paginate
from .validation import (
    ValidationResult,
    ensure_valid,
    validate_booking_form,
    validate_gallery_data,
    validate_newsletter_email,
    validate_review_data,
)

__all__ = [
    # Excepciones
    "APIException",
    "APIConnectionException",
    "ValidationException",
    "MutationInProgressException",
    "error_message",
    # Mapeos
    "map_booking_form",
    # Paginación (funciones puras)
    "compute_total_pages",
    "clamp_page",
    "paginate",
    "should_paginate",
    # Validación
    "ValidationResult",
    "ensure_valid",
    "validate_booking_form",
    "validate_gallery_data",
    "validate_newsletter_email",
    "validate_review_data",
]
