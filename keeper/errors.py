# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de las primitivas de keeper.
# --------------------------------------------------------------
"""Excepciones propagadas al llamador por las primitivas del paquete."""


class KeeperError(Exception):
    """Excepción base del paquete."""


class EntropyUnavailableError(KeeperError):
    """La fuente aleatoria segura del sistema no ha podido entregar bytes."""


class TokenError(KeeperError):
    """Error al interpretar un token compacto."""


class MalformedTokenError(TokenError):
    """El token no tiene exactamente tres segmentos separados por puntos."""


class PayloadDecodeError(TokenError):
    """El payload no es Base64 estándar sin relleno."""


class ClaimsDecodeError(TokenError):
    """El payload decodificado no es un objeto JSON con la forma de los claims."""
