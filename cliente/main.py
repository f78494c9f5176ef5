"""Inicializacion de la aplicacion de consola."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalInventoryGateway
from cliente.frontend.menu import ConsoleMenu
from parametros import DEFAULT_LOG_LEVEL, LOG_FORMAT
from servidor.services.inventory_service import InventoryService

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI."""
    parser = argparse.ArgumentParser(
        description="Gestion de productos en memoria: agregar, vender y listar."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Muestra logs de depuracion en stderr.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    """Configura logging para salida en consola."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else DEFAULT_LOG_LEVEL,
        format=LOG_FORMAT,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Ejecuta el menu de gestion de productos."""
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    inventory_service = InventoryService()
    controller = AppController(gateway=LocalInventoryGateway(inventory_service))
    menu = ConsoleMenu(controller=controller)

    LOGGER.info("Aplicacion iniciada.")
    return menu.run()


if __name__ == "__main__":
    raise SystemExit(main())
