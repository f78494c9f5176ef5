"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from dataclasses import replace

from parametros import DEFAULT_DESCRIPTION
from shared.errors import ProductoNoEncontradoError
from shared.protocol import (
    AddProductRequest,
    AddProductResponse,
    ProductDraft,
    SaleReceipt,
    SellProductRequest,
)

from .gateway import InventoryGateway, LocalInventoryGateway

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones del menu y servicios de inventario."""

    def __init__(self, gateway: InventoryGateway | None = None) -> None:
        self._gateway = gateway if gateway is not None else LocalInventoryGateway()

    def on_add_product(self, draft: ProductDraft) -> AddProductResponse:
        """Agrega un producto completando la descripcion por defecto."""
        if not draft.descripcion.strip():
            draft = replace(draft, descripcion=DEFAULT_DESCRIPTION)

        response = self._gateway.add_product(AddProductRequest(product=draft))
        LOGGER.info(
            "Accion ejecutada: agregar producto nombre=%s, perecedero=%s",
            response.nombre,
            response.es_perecedero,
        )
        return response

    def ensure_product_exists(self, nombre: str) -> None:
        """Falla con ProductoNoEncontradoError si el nombre no existe."""
        if not self._gateway.product_exists(nombre):
            LOGGER.info("Venta rechazada: producto no encontrado (%s)", nombre)
            raise ProductoNoEncontradoError(nombre)

    def on_sell(self, nombre: str, cantidad: int) -> SaleReceipt:
        """Registra una venta y retorna el comprobante."""
        receipt = self._gateway.sell_product(
            SellProductRequest(nombre=nombre, cantidad=cantidad)
        )
        LOGGER.info(
            "Accion ejecutada: vender nombre=%s, cantidad=%s",
            receipt.nombre,
            receipt.cantidad,
        )
        return receipt

    def on_list_inventory(self) -> str:
        """Retorna el inventario formateado para mostrar."""
        response = self._gateway.list_inventory()
        LOGGER.info(
            "Accion ejecutada: mostrar inventario (%s productos)",
            response.cantidad_productos,
        )
        return response.texto

    def has_products(self) -> bool:
        """Indica si hay productos que vender."""
        return self._gateway.has_products()

    def on_exit(self) -> None:
        """Registra la salida del sistema."""
        LOGGER.info("Accion ejecutada: salir")
