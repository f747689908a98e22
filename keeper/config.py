# --------------------------------------------------------------
# File: config.py
# Description: Parámetros del cliente leídos del entorno y configuración de logs.
# --------------------------------------------------------------
"""Configuración global del paquete `keeper`."""

import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("KEEPER_LOG_LEVEL", "WARNING").upper()
SECRET_SIZE = int(os.getenv("KEEPER_SECRET_SIZE", "32"))

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Instala un handler básico para las aplicaciones que usan el paquete.

    Args:
        level (Optional[Union[str, int]]): Nivel explícito; si se omite se usa
            `LOG_LEVEL`.

    """

    logging.basicConfig(
        level=LOG_LEVEL if level is None else level, format=LOG_FORMAT, force=True
    )
