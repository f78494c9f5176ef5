"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(slots=True)
class ProductDraft:
    """DTO con los datos capturados en el flujo de agregar producto."""

    nombre: str
    precio: Decimal
    existencia: int
    descripcion: str
    fecha_expiracion: date | None = None

    @property
    def es_perecedero(self) -> bool:
        return self.fecha_expiracion is not None


@dataclass(slots=True)
class AddProductRequest:
    """Solicitud para agregar un producto al inventario."""

    product: ProductDraft


@dataclass(slots=True)
class AddProductResponse:
    """Respuesta de alta de producto."""

    nombre: str
    es_perecedero: bool


@dataclass(slots=True)
class SellProductRequest:
    """Solicitud de venta de unidades de un producto."""

    nombre: str
    cantidad: int


@dataclass(slots=True)
class SaleReceipt:
    """Resultado de una venta exitosa."""

    nombre: str
    cantidad: int
    total: Decimal
    existencia_restante: int


@dataclass(slots=True)
class ListInventoryResponse:
    """Listado del inventario ya formateado."""

    texto: str
    cantidad_productos: int
