"""Servicio de inventario en memoria."""

from __future__ import annotations

import logging

from servidor.domain.models import Producto, ProductoPerecedero
from servidor.services.inventory_utils import (
    compute_total,
    format_inventario,
    normalize_lookup_key,
)
from shared.errors import (
    CantidadInvalidaError,
    ProductoNoEncontradoError,
    StockInsuficienteError,
)
from shared.protocol import ProductDraft, SaleReceipt

LOGGER = logging.getLogger(__name__)


class InventoryService:
    """Mantiene la secuencia ordenada de productos durante la ejecucion."""

    def __init__(self, productos: list[Producto] | None = None) -> None:
        self._productos: list[Producto] = list(productos or [])

    def __len__(self) -> int:
        return len(self._productos)

    def esta_vacio(self) -> bool:
        """Indica si no hay productos registrados."""
        return not self._productos

    def productos(self) -> tuple[Producto, ...]:
        """Retorna una copia inmutable de los productos en orden de alta."""
        return tuple(self._productos)

    def agregar(self, producto: Producto) -> None:
        """Agrega un producto al final, sin chequear nombres duplicados."""
        self._productos.append(producto)
        LOGGER.info(
            "Producto agregado: nombre=%s, existencia=%s, perecedero=%s",
            producto.nombre,
            producto.existencia,
            producto.es_perecedero,
        )

    def agregar_desde_draft(self, draft: ProductDraft) -> Producto:
        """Construye el producto desde el draft capturado y lo agrega."""
        if draft.es_perecedero:
            producto: Producto = ProductoPerecedero(
                nombre=draft.nombre,
                precio=draft.precio,
                existencia=draft.existencia,
                descripcion=draft.descripcion,
                fecha_expiracion=draft.fecha_expiracion,
            )
        else:
            producto = Producto(
                nombre=draft.nombre,
                precio=draft.precio,
                existencia=draft.existencia,
                descripcion=draft.descripcion,
            )

        self.agregar(producto)
        return producto

    def buscar_por_nombre(self, nombre: str) -> Producto | None:
        """Retorna el primer producto cuyo nombre coincide sin distinguir mayusculas."""
        target = normalize_lookup_key(nombre)
        for producto in self._productos:
            if normalize_lookup_key(producto.nombre) == target:
                return producto

        LOGGER.debug("Producto no encontrado: %s", nombre)
        return None

    def vender(self, nombre: str, cantidad: int) -> SaleReceipt:
        """Descuenta existencia y retorna el total de la venta.

        Si la venta falla la existencia del producto queda intacta.
        """
        producto = self.buscar_por_nombre(nombre)
        if producto is None:
            raise ProductoNoEncontradoError(nombre)

        if cantidad <= 0:
            raise CantidadInvalidaError("La cantidad debe ser un entero positivo.")

        if cantidad > producto.existencia:
            raise StockInsuficienteError(producto.nombre, cantidad, producto.existencia)

        producto.existencia -= cantidad
        total = compute_total(producto.precio, cantidad)
        LOGGER.info(
            "Venta registrada: nombre=%s, cantidad=%s, total=%s, restante=%s",
            producto.nombre,
            cantidad,
            total,
            producto.existencia,
        )
        return SaleReceipt(
            nombre=producto.nombre,
            cantidad=cantidad,
            total=total,
            existencia_restante=producto.existencia,
        )

    def listar(self) -> str:
        """Retorna el inventario completo como texto."""
        return format_inventario(self._productos)
