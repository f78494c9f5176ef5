"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from parametros import MAX_PRICE_DIGITS
from shared.errors import FechaInvalidaError, ValidationError


@dataclass(slots=True)
class Producto:
    """Representa un producto en inventario."""

    nombre: str
    precio: Decimal
    existencia: int
    descripcion: str

    def __post_init__(self) -> None:
        if not self.nombre.strip():
            raise ValidationError("El nombre no puede estar vacio.")
        if (
            not self.precio.is_finite()
            or self.precio < 0
            or self.precio.adjusted() >= MAX_PRICE_DIGITS
        ):
            raise ValidationError("Precio inválido.")
        if self.existencia < 0:
            raise ValidationError("La existencia debe ser un número entero positivo.")

    @property
    def es_perecedero(self) -> bool:
        return False


@dataclass(slots=True)
class ProductoPerecedero(Producto):
    """Producto con fecha de expiracion, nunca registrada en el pasado."""

    fecha_expiracion: date

    def __post_init__(self) -> None:
        Producto.__post_init__(self)
        if self.fecha_expiracion < date.today():
            raise FechaInvalidaError(
                "No puedes registrar un producto con fecha de expiración pasada."
            )

    @property
    def es_perecedero(self) -> bool:
        return True
