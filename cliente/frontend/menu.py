"""Menu interactivo de consola."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from cliente.backend.controller import AppController
from cliente.backend.validators import (
    parse_cantidad,
    parse_es_perecedero,
    parse_existencia,
    parse_fecha_expiracion,
    parse_menu_option,
    parse_nombre,
    parse_precio,
)
from parametros import DATE_FORMAT_HINT
from servidor.services.inventory_utils import format_lps
from shared.errors import ServiceError, ValidationError
from shared.protocol import ProductDraft

LOGGER = logging.getLogger(__name__)


class MenuState(Enum):
    """Estados del menu principal."""

    MAIN_MENU = 0
    ADD = 1
    SELL = 2
    LIST = 3
    EXIT = 4


MENU_TEXT = (
    "\nGESTIÓN DE PRODUCTOS\n"
    "1. Agregar Producto\n"
    "2. Vender Producto\n"
    "3. Mostrar Inventario\n"
    "4. Salir"
)
MENU_OPTIONS = range(1, 5)


class ConsoleMenu:
    """Bucle de menu que despacha a los flujos de agregar, vender y listar."""

    def __init__(
        self,
        controller: AppController,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._handlers: dict[MenuState, Callable[[], None]] = {
            MenuState.ADD: self._add_flow,
            MenuState.SELL: self._sell_flow,
            MenuState.LIST: self._list_flow,
        }

    def run(self) -> int:
        """Ejecuta el menu hasta que el usuario elige salir."""
        state = MenuState.MAIN_MENU
        while state is not MenuState.EXIT:
            try:
                if state is MenuState.MAIN_MENU:
                    state = self._main_menu()
                else:
                    self._handlers[state]()
                    state = MenuState.MAIN_MENU
            except EOFError:
                LOGGER.info("Fin de la entrada estandar.")
                state = MenuState.EXIT

        self._controller.on_exit()
        self._print("Saliendo del sistema...")
        return 0

    def _main_menu(self) -> MenuState:
        self._print(MENU_TEXT)
        raw = self._prompt("Seleccione una opción: ")
        try:
            option = parse_menu_option(raw, MENU_OPTIONS)
        except ValidationError as exc:
            self._print(str(exc))
            return MenuState.MAIN_MENU
        return MenuState(option)

    def _add_flow(self) -> None:
        try:
            nombre = parse_nombre(self._prompt("Ingrese el nombre del producto: "))
            precio = parse_precio(self._prompt("Ingrese el precio: "))
            existencia = parse_existencia(
                self._prompt("Ingrese la cantidad en existencia: ")
            )
            descripcion = self._prompt("Ingrese la descripción del producto: ").strip()
            es_perecedero = parse_es_perecedero(
                self._prompt("¿Es un producto perecedero? (S/N): ")
            )
            fecha_expiracion = None
            if es_perecedero:
                fecha_expiracion = parse_fecha_expiracion(
                    self._prompt(f"Ingrese la fecha de expiración ({DATE_FORMAT_HINT}): ")
                )

            response = self._controller.on_add_product(
                ProductDraft(
                    nombre=nombre,
                    precio=precio,
                    existencia=existencia,
                    descripcion=descripcion,
                    fecha_expiracion=fecha_expiracion,
                )
            )
        except (ValidationError, ServiceError) as exc:
            self._print(f"Error: {exc}")
            return

        if response.es_perecedero:
            self._print(f"Producto perecedero '{response.nombre}' agregado exitosamente.")
        else:
            self._print(f"Producto '{response.nombre}' agregado exitosamente.")

    def _sell_flow(self) -> None:
        if not self._controller.has_products():
            self._print("No hay productos en el inventario.")
            return

        try:
            nombre = self._prompt("Ingrese el nombre del producto a vender: ").strip()
            self._controller.ensure_product_exists(nombre)
            cantidad = parse_cantidad(self._prompt("Ingrese la cantidad a vender: "))
            receipt = self._controller.on_sell(nombre, cantidad)
        except (ValidationError, ServiceError) as exc:
            self._print(str(exc))
            return

        self._print(f"Venta realizada: {receipt.cantidad} unidades de {receipt.nombre}.")
        self._print(f"Total gastado: {format_lps(receipt.total)}")
        self._print(f"Stock restante: {receipt.existencia_restante} unidades.")

    def _list_flow(self) -> None:
        texto = self._controller.on_list_inventory()
        if self._controller.has_products():
            self._print("\nInventario Actual:")
        self._print(texto)

    def _prompt(self, message: str) -> str:
        self._stdout.write(message)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _print(self, message: str) -> None:
        self._stdout.write(f"{message}\n")
