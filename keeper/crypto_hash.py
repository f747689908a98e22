# --------------------------------------------------------------
# File: crypto_hash.py
# Description: Cálculo y comprobación de digests SHA-256 del contenido.
# --------------------------------------------------------------
"""Digests de integridad para las versiones almacenadas.

`verify_hash` solo confirma que el contenido corresponde al digest declarado;
no autentica el origen del contenido.
"""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.constant_time import bytes_eq


def hash_content(content: bytes) -> str:
    """Calcula el digest SHA-256 del contenido en hexadecimal en minúsculas.

    Args:
        content (bytes): Secuencia de bytes exacta a resumir.

    Returns:
        str: Digest de 64 caracteres hexadecimales.

    """

    digest = hashes.Hash(hashes.SHA256())
    digest.update(content)
    return digest.finalize().hex()


def verify_hash(digest: str, content: bytes) -> bool:
    """Comprueba, sin distinguir mayúsculas, que `digest` corresponde al contenido.

    Args:
        digest (str): Digest hexadecimal declarado.
        content (bytes): Contenido que se quiere validar.

    Returns:
        bool: True si el digest recalculado coincide.

    """

    expected = hash_content(content).encode("ascii")
    return bytes_eq(digest.lower().encode("utf-8"), expected)
