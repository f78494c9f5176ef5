"""Validaciones para entradas del cliente."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from parametros import DATE_FORMAT, DATE_FORMAT_HINT, MAX_PRICE_DIGITS, PERISHABLE_YES
from shared.errors import CantidadInvalidaError, FechaInvalidaError, ValidationError

_DATE_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def parse_menu_option(raw: str, options: range) -> int:
    """Parsea la opcion del menu principal."""
    try:
        option = int(raw.strip())
    except ValueError as exc:
        raise ValidationError("Opción inválida. Intente nuevamente.") from exc

    if option not in options:
        raise ValidationError("Opción inválida.")
    return option


def parse_nombre(raw: str) -> str:
    """Valida que el nombre del producto no este vacio."""
    nombre = raw.strip()
    if not nombre:
        raise ValidationError("El nombre no puede estar vacio.")
    return nombre


def parse_precio(raw: str) -> Decimal:
    """Parsea un precio decimal no negativo."""
    text = raw.strip().replace(",", ".")
    try:
        precio = Decimal(text)
    except InvalidOperation as exc:
        raise ValidationError("Precio inválido.") from exc

    if not precio.is_finite() or precio < 0 or precio.adjusted() >= MAX_PRICE_DIGITS:
        raise ValidationError("Precio inválido.")
    return precio


def parse_existencia(raw: str) -> int:
    """Parsea la existencia inicial como entero no negativo."""
    try:
        existencia = int(raw.strip())
    except ValueError as exc:
        raise ValidationError(
            "La existencia debe ser un número entero positivo."
        ) from exc

    if existencia < 0:
        raise ValidationError("La existencia debe ser un número entero positivo.")
    return existencia


def parse_cantidad(raw: str) -> int:
    """Parsea la cantidad a vender como entero mayor a cero."""
    try:
        cantidad = int(raw.strip())
    except ValueError as exc:
        raise CantidadInvalidaError("La cantidad debe ser un entero positivo.") from exc

    if cantidad <= 0:
        raise CantidadInvalidaError("La cantidad debe ser un entero positivo.")
    return cantidad


def parse_es_perecedero(raw: str) -> bool:
    """Interpreta la respuesta S/N; cualquier valor distinto de S es No."""
    return raw.strip().upper() == PERISHABLE_YES


def parse_fecha_expiracion(raw: str, hoy: date | None = None) -> date:
    """Parsea una fecha dd/mm/yyyy y rechaza fechas anteriores a hoy."""
    text = raw.strip()
    if not _DATE_PATTERN.fullmatch(text):
        raise FechaInvalidaError(f"Fecha inválida. Use el formato {DATE_FORMAT_HINT}.")

    try:
        fecha = datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise FechaInvalidaError(f"Fecha inválida: {text}") from exc

    if fecha < (hoy or date.today()):
        raise FechaInvalidaError(
            "No puedes registrar un producto con fecha de expiración pasada."
        )
    return fecha
