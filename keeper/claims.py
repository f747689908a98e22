# --------------------------------------------------------------
# File: claims.py
# Description: Extracción de identidad y caducidad desde tokens compactos.
# --------------------------------------------------------------
"""Lectura de los claims `name` y `exp` de un token `header.payload.signature`.

IMPORTANTE: la firma del token NO se verifica. Los valores devueltos son
meramente informativos y no deben usarse para decisiones de confianza salvo
que la firma se haya validado antes en otra capa.

El payload se decodifica con el alfabeto Base64 estándar y sin relleno, que
es el formato que emite el servidor del vault; no se acepta el alfabeto
URL-safe habitual en JWT.
"""

import base64
import logging
from datetime import UTC, datetime

from pydantic import ValidationError

from keeper.errors import ClaimsDecodeError, MalformedTokenError, PayloadDecodeError
from keeper.models import TokenClaims

logger = logging.getLogger(__name__)

TOKEN_SEGMENTS = 3


def _decode_segment(segment: str) -> bytes:
    """Decodifica Base64 estándar sin relleno, rechazando `=` explícitos."""

    if "=" in segment:
        raise ValueError("el segmento no debe llevar relleno")
    return base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)


def parse_claims(token: str) -> TokenClaims:
    """Interpreta el payload del token sin comprobar su firma.

    Args:
        token (str): Token compacto con tres segmentos separados por `.`.

    Returns:
        TokenClaims: Claims del payload; los ausentes toman su valor cero. Un
            payload `null` equivale a un objeto vacío.

    Raises:
        MalformedTokenError: Si el token no tiene exactamente tres segmentos.
        PayloadDecodeError: Si el payload no es Base64 estándar sin relleno.
        ClaimsDecodeError: Si el payload no es un objeto JSON válido.

    """

    segments = token.split(".")
    if len(segments) != TOKEN_SEGMENTS:
        logger.debug("token parse error: %d segmentos", len(segments))
        raise MalformedTokenError("Token inválido.")

    try:
        payload = _decode_segment(segments[1])
    except ValueError as exc:
        logger.debug("base64 decode error: %s", exc)
        raise PayloadDecodeError("El payload del token no es Base64 válido.") from exc

    if payload.strip() == b"null":
        return TokenClaims()
    try:
        return TokenClaims.model_validate_json(payload)
    except ValidationError as exc:
        logger.debug("json decode error: %s", exc)
        raise ClaimsDecodeError("El payload del token no contiene claims válidos.") from exc


def extract_name(token: str) -> str:
    """Devuelve el claim `name` (nombre del vault) del token."""

    return parse_claims(token).name


def extract_expiry(token: str) -> datetime:
    """Devuelve el instante de caducidad del token.

    Args:
        token (str): Token compacto.

    Returns:
        datetime: Instante UTC correspondiente al claim `exp`.

    """

    exp = parse_claims(token).exp
    try:
        return datetime.fromtimestamp(exp, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        logger.debug("exp fuera de rango: %s", exc)
        raise ClaimsDecodeError(f"Caducidad fuera de rango: {exp}") from exc
