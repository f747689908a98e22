# --------------------------------------------------------------
# File: versions.py
# Description: Sellado, verificación y deduplicación del historial de versiones.
# --------------------------------------------------------------
"""Operaciones sobre el historial de versiones de un secreto."""

from datetime import UTC, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import TypeAdapter

from keeper.crypto_hash import hash_content, verify_hash
from keeper.models import Version

_VERSION_LIST = TypeAdapter(List[Version])


def stamp_version(content: bytes, date: Optional[datetime] = None) -> Version:
    """Registra una versión del contenido identificada por su digest.

    Args:
        content (bytes): Contenido serializado exactamente como se almacenará.
        date (Optional[datetime]): Instante de registro; por defecto, ahora (UTC).

    Returns:
        Version: Versión con el digest SHA-256 del contenido.

    """

    return Version(hash=hash_content(content), date=date or datetime.now(UTC))


def verify_version(version: Version, content: bytes) -> bool:
    """Comprueba que el contenido corresponde al digest de la versión."""

    return verify_hash(version.hash, content)


def deduplicate(versions: Iterable[Version]) -> List[Version]:
    """Reduce el historial a una versión por digest, con la fecha más reciente.

    El orden de salida es el de la primera aparición de cada digest. Una fecha
    solo reemplaza a la registrada si es estrictamente posterior, de modo que
    en caso de empate se conserva el primer registro.

    Args:
        versions (Iterable[Version]): Historial sin orden garantizado.

    Returns:
        List[Version]: Una versión por digest distinto.

    """

    latest: Dict[str, Version] = {}
    for version in versions:
        current = latest.get(version.hash)
        if current is None or version.date > current.date:
            latest[version.hash] = version
    return list(latest.values())


def load_versions(records: Iterable[Mapping[str, Any]]) -> List[Version]:
    """Valida registros `{"hash", "date"}` y los convierte en versiones."""

    return _VERSION_LIST.validate_python(list(records))


def dump_versions(versions: Iterable[Version]) -> List[Dict[str, Any]]:
    """Serializa versiones a registros JSON con fechas ISO-8601."""

    return _VERSION_LIST.dump_python(list(versions), mode="json")
