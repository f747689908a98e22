# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos de claims de token y versiones de contenido.
# --------------------------------------------------------------
"""Modelos Pydantic que representan los valores intercambiados por el núcleo."""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class TokenClaims(BaseModel):
    """Claims de identidad y caducidad transportados en el payload de un token.

    La decodificación es estricta con los tipos pero permisiva con la
    presencia: un campo ausente o `null` toma su valor cero.

    Attributes:
        name (str): Identidad (nombre del vault) emitida en el token.
        exp (int): Caducidad en segundos Unix, dentro del rango de 64 bits.

    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    name: str = ""
    exp: Int64 = 0

    @field_validator("name", "exp", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Version(BaseModel):
    """Instantánea de contenido identificada por su digest y su fecha.

    Attributes:
        hash (str): Digest SHA-256 en hexadecimal del contenido.
        date (datetime): Instante en el que se registró la versión.

    """

    model_config = ConfigDict(frozen=True)

    hash: str
    date: datetime

    @field_validator("date")
    @classmethod
    def _naive_as_utc(cls, value: datetime) -> datetime:
        # Las fechas sin zona se interpretan en UTC para poder compararlas.
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
