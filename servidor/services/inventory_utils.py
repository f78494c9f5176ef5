"""Utilidades de formato para lineas de inventario."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from parametros import CURRENCY, DATE_FORMAT
from servidor.domain.models import Producto, ProductoPerecedero

EMPTY_INVENTORY_MESSAGE = "El inventario está vacío."

_CENTS = Decimal("0.01")


def compute_total(precio: Decimal, cantidad: int) -> Decimal:
    """Multiplica precio por cantidad sin perder digitos por la precision del contexto."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(precio.as_tuple().digits) + len(str(abs(cantidad))))
        return precio * cantidad


def format_lps(amount: Decimal) -> str:
    """Formatea un monto en lempiras con dos decimales."""
    with localcontext() as ctx:
        # quantize exige que el resultado quepa en la precision del contexto
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        rounded_amount = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{CURRENCY} {rounded_amount:.2f}"


def format_fecha(value: date) -> str:
    """Formatea una fecha como dd/mm/yyyy."""
    return value.strftime(DATE_FORMAT)


def format_producto(producto: Producto) -> str:
    """Construye la linea de inventario de un producto."""
    parts = [
        f"Producto: {producto.nombre}",
        f"Precio: {format_lps(producto.precio)}",
        f"Existencia: {producto.existencia}",
        f"Descripción: {producto.descripcion}",
    ]
    if isinstance(producto, ProductoPerecedero):
        parts.append(f"Fecha de Expiración: {format_fecha(producto.fecha_expiracion)}")

    return " | ".join(parts)


def format_inventario(productos: list[Producto] | tuple[Producto, ...]) -> str:
    """Une las lineas de inventario, o indica explicitamente que esta vacio."""
    if not productos:
        return EMPTY_INVENTORY_MESSAGE

    return "\n".join(format_producto(producto) for producto in productos)


def normalize_lookup_key(text: str) -> str:
    """Normaliza un nombre para comparaciones sin distinguir mayusculas."""
    return text.strip().casefold()
