# bodas/web/frontend/api/schemas.py
"""
Modelos de datos que cruzan la frontera con el backend JSON.

Sólo se modelan las formas que el frontend construye o completa por sí mismo
(cuerpos de escritura y ajustes con valores por defecto). Las respuestas de
listado se consumen tal cual llegan en el sobre {success, data, pagination}.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

BookingStatus = Literal["pending", "confirmed", "consulted", "cancelled"]
BOOKING_STATUSES = ("pending", "confirmed", "consulted", "cancelled")


class BookingForm(BaseModel):
    """Formulario público de reserva de consulta."""

    model_config = ConfigDict(extra="ignore")

    name: str
    phone: str
    email: str = ""
    date: str
    time: str
    service: str = ""
    message: Optional[str] = None


class BookingPayload(BaseModel):
    """Cuerpo que espera POST /api/bookings."""

    customerName: str
    phone: str
    consultationDate: str
    consultationTime: str
    requirements: Optional[str] = None
    status: BookingStatus = "pending"


class ContactForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str


class ReviewPayload(BaseModel):
    customerName: str = Field(..., max_length=100)
    avatarUrl: str
    content: str = Field(..., max_length=1000)
    rating: int = Field(..., ge=1, le=5)
    eventDate: str


class GalleryPayload(BaseModel):
    title: str = Field(..., max_length=200)
    description: str = Field(..., max_length=500)
    imageUrl: str


class GeneralSettings(BaseModel):
    """Ajustes generales del sitio. Los campos ausentes en el backend toman estos valores."""

    model_config = ConfigDict(extra="allow")

    brandName: str = "Wedding Dreams"
    logoUrl: Optional[str] = ""
    description: Optional[str] = "Creamos las bodas de tus sueños con un servicio profesional y cercano."
    address: str = "Hanói, Vietnam"
    phone: str = "0123456789"
    email: str = "contact@weddingdreams.vn"
    openTime: str = "09:00"
    closeTime: str = "18:00"
    facebookPage: Optional[str] = ""
    instagram: Optional[str] = ""
    website: Optional[str] = ""
    zaloUrl: Optional[str] = None
    slogan: Optional[str] = None
