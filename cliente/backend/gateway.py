"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.services.inventory_service import InventoryService
from shared.errors import ServiceError, ValidationError
from shared.protocol import (
    AddProductRequest,
    AddProductResponse,
    ListInventoryResponse,
    SaleReceipt,
    SellProductRequest,
)

LOGGER = logging.getLogger(__name__)


class InventoryGateway(Protocol):
    """Interfaz de acceso del cliente al inventario."""

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Solicita el alta de un producto."""

    def sell_product(self, request: SellProductRequest) -> SaleReceipt:
        """Solicita la venta de unidades de un producto."""

    def list_inventory(self) -> ListInventoryResponse:
        """Solicita el listado formateado del inventario."""

    def product_exists(self, nombre: str) -> bool:
        """Consulta si existe un producto con el nombre indicado."""

    def has_products(self) -> bool:
        """Consulta si el inventario tiene al menos un producto."""


class LocalInventoryGateway:
    """Implementacion local del gateway usando el servicio en memoria."""

    def __init__(self, inventory_service: InventoryService | None = None) -> None:
        self._inventory_service = (
            inventory_service if inventory_service is not None else InventoryService()
        )

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Agrega un producto delegando en el servicio."""
        try:
            producto = self._inventory_service.agregar_desde_draft(request.product)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError(f"Error inesperado: {exc}") from exc

        return AddProductResponse(
            nombre=producto.nombre,
            es_perecedero=producto.es_perecedero,
        )

    def sell_product(self, request: SellProductRequest) -> SaleReceipt:
        """Registra una venta delegando en el servicio."""
        try:
            return self._inventory_service.vender(request.nombre, request.cantidad)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al vender producto: %s", request.nombre)
            raise ServiceError(f"Error inesperado: {exc}") from exc

    def list_inventory(self) -> ListInventoryResponse:
        """Retorna el inventario formateado."""
        return ListInventoryResponse(
            texto=self._inventory_service.listar(),
            cantidad_productos=len(self._inventory_service),
        )

    def product_exists(self, nombre: str) -> bool:
        return self._inventory_service.buscar_por_nombre(nombre) is not None

    def has_products(self) -> bool:
        return not self._inventory_service.esta_vacio()
