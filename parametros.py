"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

DATE_FORMAT = "%d/%m/%Y"
DATE_FORMAT_HINT = "dd/mm/yyyy"
CURRENCY = "LPS"
DEFAULT_DESCRIPTION = "Sin descripción"
PERISHABLE_YES = "S"

MAX_PRICE_DIGITS = 26

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING
