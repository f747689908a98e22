# --------------------------------------------------------------
# File: crypto_rand.py
# Description: Generación de material secreto con la fuente aleatoria del sistema.
# --------------------------------------------------------------
"""Generación de secuencias aleatorias criptográficamente seguras."""

import logging
import os

from keeper.config import SECRET_SIZE
from keeper.errors import EntropyUnavailableError

logger = logging.getLogger(__name__)


def generate_secret(n: int = SECRET_SIZE) -> bytes:
    """Genera `n` bytes aleatorios para usar como clave secreta.

    Args:
        n (int): Longitud solicitada en bytes; `0` devuelve una secuencia vacía.

    Returns:
        bytes: Material secreto obtenido del CSPRNG del sistema operativo.

    Raises:
        ValueError: Si `n` es negativo.
        EntropyUnavailableError: Si el sistema no puede entregar entropía. No
            se reintenta.

    """

    if n < 0:
        raise ValueError(f"La longitud del secreto no puede ser negativa: {n}")
    try:
        return os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        logger.debug("fuente de entropía no disponible: %s", exc)
        raise EntropyUnavailableError("No se pudo obtener entropía del sistema.") from exc
