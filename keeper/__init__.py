# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las primitivas de integridad e identidad.
# --------------------------------------------------------------
"""Inicializa el paquete `keeper` y documenta sus módulos principales."""

__all__ = [
    "claims",
    "config",
    "console",
    "crypto_hash",
    "crypto_rand",
    "errors",
    "models",
    "versions",
]
