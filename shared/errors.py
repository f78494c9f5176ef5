"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class CantidadInvalidaError(ValidationError):
    """La cantidad a vender no es un entero positivo."""


class FechaInvalidaError(ValidationError):
    """Fecha de expiracion mal formada o anterior a hoy."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class ProductoNoEncontradoError(ServiceError):
    """No existe un producto con el nombre indicado."""

    def __init__(self, nombre: str) -> None:
        super().__init__("Producto no encontrado.")
        self.nombre = nombre


class StockInsuficienteError(ServiceError):
    """La cantidad solicitada supera la existencia disponible."""

    def __init__(self, nombre: str, cantidad: int, existencia: int) -> None:
        super().__init__(
            f"No hay suficiente stock para vender {cantidad} unidades de {nombre}."
        )
        self.nombre = nombre
        self.cantidad = cantidad
        self.existencia = existencia
