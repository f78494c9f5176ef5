"""Tests del menu interactivo de consola."""

from __future__ import annotations

import io
import unittest
from datetime import date, timedelta
from decimal import Decimal
from unittest import mock

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalInventoryGateway
from cliente.frontend.menu import ConsoleMenu
from servidor.domain.models import Producto, ProductoPerecedero
from servidor.services.inventory_service import InventoryService


class ConsoleMenuTests(unittest.TestCase):
    """Ejecuta el menu con entradas simuladas y revisa la salida."""

    def setUp(self) -> None:
        self.service = InventoryService()

    def _run(self, *lines: str) -> tuple[int, str]:
        controller = AppController(gateway=LocalInventoryGateway(self.service))
        stdout = io.StringIO()
        menu = ConsoleMenu(
            controller=controller,
            stdin=io.StringIO("".join(f"{line}\n" for line in lines)),
            stdout=stdout,
        )
        return menu.run(), stdout.getvalue()

    def test_salir(self) -> None:
        """La opcion 4 termina con codigo 0."""
        status_code, output = self._run("4")

        self.assertEqual(status_code, 0)
        self.assertIn("GESTIÓN DE PRODUCTOS", output)
        self.assertIn("Saliendo del sistema...", output)

    def test_fin_de_entrada_termina(self) -> None:
        """Sin mas entrada el menu termina como si se eligiera salir."""
        status_code, output = self._run()

        self.assertEqual(status_code, 0)
        self.assertIn("Saliendo del sistema...", output)

    def test_opcion_invalida_vuelve_al_menu(self) -> None:
        """Entradas invalidas muestran error y se vuelve a mostrar el menu."""
        _, output = self._run("hola", "9", "4")

        self.assertIn("Opción inválida. Intente nuevamente.", output)
        self.assertIn("Opción inválida.\n", output)
        self.assertEqual(output.count("GESTIÓN DE PRODUCTOS"), 3)

    def test_agregar_vender_y_listar(self) -> None:
        """Flujo completo: agregar, vender 3 de 10 y listar."""
        _, output = self._run(
            "1", "Arroz", "25.50", "10", "Bolsa 1kg", "N",
            "2", "arroz", "3",
            "3",
            "4",
        )

        self.assertIn("Producto 'Arroz' agregado exitosamente.", output)
        self.assertIn("Venta realizada: 3 unidades de Arroz.", output)
        self.assertIn("Total gastado: LPS 76.50", output)
        self.assertIn("Stock restante: 7 unidades.", output)
        self.assertIn("Inventario Actual:", output)
        self.assertIn(
            "Producto: Arroz | Precio: LPS 25.50 | Existencia: 7 | Descripción: Bolsa 1kg",
            output,
        )

    def test_agregar_perecedero(self) -> None:
        """Con S se pide la fecha y se crea un producto perecedero."""
        fecha = (date.today() + timedelta(days=10)).strftime("%d/%m/%Y")

        _, output = self._run("1", "Leche", "30", "5", "", "s", fecha, "4")

        self.assertIn("Producto perecedero 'Leche' agregado exitosamente.", output)
        producto = self.service.productos()[0]
        self.assertIsInstance(producto, ProductoPerecedero)
        self.assertEqual(producto.descripcion, "Sin descripción")

    def test_fecha_mal_formada_descarta_producto(self) -> None:
        """Una fecha invalida aborta el alta sin crear producto."""
        _, output = self._run("1", "Leche", "30", "5", "Litro", "S", "2026-13-01", "4")

        self.assertIn("Error: Fecha inválida", output)
        self.assertTrue(self.service.esta_vacio())

    def test_fecha_pasada_descarta_producto(self) -> None:
        """Una fecha anterior a hoy aborta el alta."""
        fecha = (date.today() - timedelta(days=1)).strftime("%d/%m/%Y")

        _, output = self._run("1", "Leche", "30", "5", "Litro", "S", fecha, "4")

        self.assertIn("fecha de expiración pasada", output)
        self.assertTrue(self.service.esta_vacio())

    def test_precio_invalido_aborta_sin_pedir_mas_datos(self) -> None:
        """Un precio no numerico aborta el alta y vuelve al menu."""
        _, output = self._run("1", "Arroz", "caro", "4")

        self.assertIn("Error: Precio inválido.", output)
        self.assertNotIn("Ingrese la cantidad en existencia", output)
        self.assertTrue(self.service.esta_vacio())

    def test_vender_sin_productos(self) -> None:
        """Vender con inventario vacio lo informa sin pedir datos."""
        _, output = self._run("2", "4")

        self.assertIn("No hay productos en el inventario.", output)
        self.assertNotIn("Ingrese el nombre del producto a vender", output)

    def test_vender_errores_no_son_fatales(self) -> None:
        """Producto inexistente, cantidad invalida y stock insuficiente se reportan."""
        _, output = self._run(
            "1", "Arroz", "10", "2", "x", "N",
            "2", "Frijoles",
            "2", "Arroz", "0",
            "2", "Arroz", "5",
            "4",
        )

        self.assertIn("Producto no encontrado.", output)
        self.assertIn("La cantidad debe ser un entero positivo.", output)
        self.assertIn("No hay suficiente stock para vender 5 unidades de Arroz.", output)
        self.assertEqual(self.service.productos()[0].existencia, 2)
        self.assertIn("Saliendo del sistema...", output)

    def test_precio_fuera_de_rango_no_termina_el_menu(self) -> None:
        """Un precio demasiado grande se rechaza y el menu sigue activo."""
        _, output = self._run(
            "1", "Oro", "100000000000000000000000000", "3", "4",
        )

        self.assertIn("Error: Precio inválido.", output)
        self.assertIn("El inventario está vacío.", output)
        self.assertIn("Saliendo del sistema...", output)

    def test_precio_grande_valido_se_lista_y_vende(self) -> None:
        """Precios grandes dentro del rango se listan y venden sin error."""
        _, output = self._run(
            "1", "Oro", "99999999999999999999999999.99", "5", "x", "N",
            "3",
            "2", "Oro", "5",
            "4",
        )

        self.assertIn("Precio: LPS 99999999999999999999999999.99", output)
        self.assertIn("Total gastado: LPS 499999999999999999999999999.95", output)

    def test_error_inesperado_vuelve_al_menu(self) -> None:
        """Un fallo inesperado del servicio se informa y se vuelve al menu."""
        self.service.agregar(Producto("Arroz", Decimal("10"), 5, "x"))

        with mock.patch.object(
            self.service, "vender", side_effect=RuntimeError("boom")
        ), self.assertLogs("cliente.backend.gateway", level="ERROR"):
            _, output = self._run("2", "Arroz", "1", "3", "4")

        self.assertIn("Error inesperado: boom", output)
        self.assertEqual(output.count("GESTIÓN DE PRODUCTOS"), 3)
        self.assertIn("Existencia: 5", output)

    def test_usa_el_inventario_inyectado(self) -> None:
        """Lo agregado desde el menu queda en el inventario recibido."""
        self._run("1", "Arroz", "10", "2", "x", "N", "4")

        self.assertEqual(len(self.service), 1)

    def test_listar_vacio(self) -> None:
        """Listar sin productos indica inventario vacio."""
        _, output = self._run("3", "4")

        self.assertIn("El inventario está vacío.", output)
        self.assertNotIn("Inventario Actual:", output)


if __name__ == "__main__":
    unittest.main()
