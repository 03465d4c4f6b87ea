"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta al asignar (`validate_assignment`) sin acoplar el Core a I/O.
- Todos los campos tienen default: el `ModelRegistry` construye las entidades
  sin argumentos y luego las hidrata.

Nota:
- Los importes son enteros en céntimos (960 == 9,60).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Receiver(BaseModel):
    """Entidad benéfica seleccionable en el checkout."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    id: int | None = Field(
        default=None,
        description="Identificador del receiver en el API.",
    )
    name: str = Field(
        default="",
        max_length=256,
        description="Nombre público de la organización.",
    )
    description: str = Field(
        default="",
        description="Descripción corta para el widget.",
    )
    images: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="URLs de imágenes por orientación y tamaño (p.ej. images['horizontal']['small']).",
    )
    countrycode: str | None = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Idioma/país en que se entregaron los textos.",
    )
    valid: datetime | None = Field(
        default=None,
        description="Fecha hasta la que el receiver es seleccionable.",
    )

    def get_image(self, orientation: str = "horizontal", size: str = "medium") -> str | None:
        return self.images.get(orientation, {}).get(size)


class Donation(BaseModel):
    """Línea de donación enviada al API junto al pedido.

    Mapea a camelCase con `to_api_payload`, que es el formato que espera el API.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    foreign_id: str | None = Field(
        default=None,
        description="Id del pedido en la tienda.",
    )
    time: datetime | None = Field(
        default=None,
        description="Momento de la donación.",
    )
    amount: int = Field(
        default=0,
        ge=0,
        description="Importe donado (céntimos).",
    )
    suggested_amount: int | None = Field(
        default=None,
        ge=0,
        description="Importe sugerido por el widget (céntimos).",
    )
    grand_total: int | None = Field(
        default=None,
        ge=0,
        description="Total del pedido incluyendo la donación (céntimos).",
    )
    receiver_ids: list[int] = Field(
        default_factory=list,
        description="Receivers elegidos por el comprador.",
    )
    available_receiver_ids: list[int] = Field(
        default_factory=list,
        description="Receivers que se mostraron en el widget.",
    )
    donator: dict[str, str] = Field(
        default_factory=dict,
        description="Datos opcionales del donante (email, firstName, lastName, streetAddress, zip, city, countrycode, company).",
    )

    def to_api_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "foreignId": self.foreign_id,
            "donationTimestamp": self.time.isoformat() if self.time else None,
            "donationAmount": self.amount,
            "receivers": list(self.receiver_ids),
            "receiversAvailable": list(self.available_receiver_ids),
        }
        if self.suggested_amount is not None:
            payload["donationAmountSuggested"] = self.suggested_amount
        if self.grand_total is not None:
            payload["grandTotal"] = self.grand_total
        if self.donator:
            payload["donator"] = dict(self.donator)
        return payload
